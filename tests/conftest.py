"""Shared pytest fixtures and configuration for the mpags-cipher test suite.

Guidelines
----------
* Core tests must be pure — no side effects.
* File I/O only under ``tmp_path``.
* Tests must not depend on OS state.
"""

from __future__ import annotations
