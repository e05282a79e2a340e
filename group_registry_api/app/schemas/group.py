"""
Pydantic schemas for groups.

A group is stored as a summary holding member student ids.  The
detail view resolves those ids to full student records at read
time.  ``groupName`` is the wire name of the ``group_name`` field in
every schema here.
"""

from typing import List

from pydantic import BaseModel, Field

from .student import StudentRead


class GroupCreate(BaseModel):
    """Schema for creating a new group.

    ``members`` holds student names, not ids.  An empty list is
    accepted and duplicates are kept.
    """

    group_name: str = Field(..., alias="groupName", description="Display name of the group")
    members: List[str] = Field(..., description="Names of the students to add")


class GroupSummary(BaseModel):
    """Schema for a stored group with member ids."""

    id: int
    group_name: str = Field(..., alias="groupName")
    members: List[int] = Field(default_factory=list, description="Student ids in insertion order")


class GroupDetail(BaseModel):
    """Schema for a group with its members resolved to students."""

    id: int
    group_name: str = Field(..., alias="groupName")
    members: List[StudentRead]
