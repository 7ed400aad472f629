"""Shared utilities — constants, logging, and cross-cutting concerns.

Rules
-----
* No business logic.
* No I/O beyond log configuration.
* Importable by any layer.
"""
