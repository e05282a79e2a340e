"""
Group endpoints for API v1.

These routes list, create, delete and inspect groups.  Failures are
reported with short plain‑text bodies rather than JSON: 400
``Invalid member input`` when a member name matches no student, and
404 ``Group not found`` for an unknown id.  Deleting is idempotent
and always answers 204.
"""

from typing import List, Union

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from group_registry_api.app.core.dependencies import get_registry
from group_registry_api.app.core.errors import GroupNotFoundError, InvalidMemberError
from group_registry_api.app.schemas.group import GroupCreate, GroupDetail, GroupSummary
from group_registry_api.app.services.registry_service import RegistryService

router = APIRouter()

INVALID_MEMBER_MESSAGE = "Invalid member input"
GROUP_NOT_FOUND_MESSAGE = "Group not found"


@router.get("", response_model=List[GroupSummary])
async def list_groups(registry: RegistryService = Depends(get_registry)) -> List[GroupSummary]:
    """Return every group summary in insertion order."""
    return await registry.list_groups()


@router.post(
    "",
    response_model=GroupSummary,
    responses={status.HTTP_400_BAD_REQUEST: {"description": INVALID_MEMBER_MESSAGE}},
)
async def create_group(
    group_in: GroupCreate,
    registry: RegistryService = Depends(get_registry),
) -> Union[GroupSummary, PlainTextResponse]:
    """Create a group from member names.

    Member names are resolved to student ids.  If any name is
    unknown nothing is created and a 400 is returned.
    """
    try:
        return await registry.create_group(group_in.group_name, group_in.members)
    except InvalidMemberError:
        return PlainTextResponse(INVALID_MEMBER_MESSAGE, status_code=status.HTTP_400_BAD_REQUEST)


@router.delete("/{group_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_group(
    group_id: int,
    registry: RegistryService = Depends(get_registry),
) -> None:
    """Delete a group by ID; unknown IDs are ignored."""
    await registry.delete_group(group_id)
    return None


@router.get(
    "/{group_id}",
    response_model=GroupDetail,
    responses={status.HTTP_404_NOT_FOUND: {"description": GROUP_NOT_FOUND_MESSAGE}},
)
async def get_group(
    group_id: int,
    registry: RegistryService = Depends(get_registry),
) -> Union[GroupDetail, PlainTextResponse]:
    """Retrieve a group with its members resolved to students."""
    try:
        return await registry.get_group_detail(group_id)
    except GroupNotFoundError:
        return PlainTextResponse(GROUP_NOT_FOUND_MESSAGE, status_code=status.HTTP_404_NOT_FOUND)
