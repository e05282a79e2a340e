"""
Main entrypoint for the Group Registry API.

This module assembles the FastAPI application, sets up logging and
CORS, creates the in‑memory registry and includes the versioned
router.  The ``create_app`` function builds and configures the app,
which is then instantiated at module import time as ``app``::

    uvicorn group_registry_api.app.main:app --port 3902

Tests call ``create_app`` with their own ``RegistryService`` so every
test starts from the seed data.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .services.registry_service import RegistryService


def create_app(registry: Optional[RegistryService] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    registry : Optional[RegistryService]
        Registry to serve.  A freshly seeded one is created when
        omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the startup hook
    # and request handlers can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.registry = registry if registry is not None else RegistryService()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.on_event("startup")
    async def startup_event() -> None:
        state = app.state.registry
        logging.getLogger(__name__).info(
            "Registry ready with %d students and %d groups",
            state.student_count,
            state.group_count,
        )

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
