"""
Student endpoints for API v1.

Students are seeded when the application starts and are read‑only;
the only route lists them.
"""

from typing import List

from fastapi import APIRouter, Depends

from group_registry_api.app.core.dependencies import get_registry
from group_registry_api.app.schemas.student import StudentRead
from group_registry_api.app.services.registry_service import RegistryService

router = APIRouter()


@router.get("", response_model=List[StudentRead])
async def list_students(registry: RegistryService = Depends(get_registry)) -> List[StudentRead]:
    """Return every student in seed order."""
    return await registry.list_students()
