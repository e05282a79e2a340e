"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` for settings, logging and errors, ``schemas``
for request and response models, ``services`` for the registry
logic and ``api`` for the versioned routers.
"""

from .main import app, create_app  # noqa: F401
