from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from group_registry_api.app.main import create_app
from group_registry_api.app.services.registry_service import RegistryService


@pytest.fixture
def registry() -> RegistryService:
    """A freshly seeded registry for each test."""
    return RegistryService()


@pytest.fixture
def client(registry: RegistryService) -> TestClient:
    return TestClient(create_app(registry))
