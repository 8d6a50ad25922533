"""Centralized FastAPI dependency definitions for the API layer.

Routers should import dependencies from here instead of directly from
their underlying implementation modules. This provides:

* A stable import surface (refactors in lower layers don't ripple up)
* Easier test overrides via ``app.dependency_overrides[deps.get_store]``
"""

from rental.core.auth import get_app_settings as get_settings
from rental.core.auth import get_current_identity, require_admin
from rental.db.store import get_store

__all__ = ["get_store", "get_settings", "get_current_identity", "require_admin"]
