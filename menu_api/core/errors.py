"""
core/errors.py – Error kinds surfaced by handlers and the store.
"""


class MenuError(Exception):
    """Base class for every error this service raises on purpose."""


class ValidationError(MenuError):
    """Request is malformed or breaks a business rule (→ 400)."""


class StoreError(MenuError):
    """Persistence failure: connection, constraint, bad statement (→ 500)."""
