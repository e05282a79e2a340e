"""
FastAPI dependencies shared by the endpoints.

The registry instance is created by ``create_app`` and stored on
``app.state``; handlers obtain it through ``get_registry`` rather
than importing a module‑level singleton.
"""

from fastapi import Request

from group_registry_api.app.services.registry_service import RegistryService


def get_registry(request: Request) -> RegistryService:
    """Return the registry owned by the running application."""
    return request.app.state.registry
