"""Pydantic schema for students."""

from pydantic import BaseModel, Field


class StudentRead(BaseModel):
    """Schema for reading a student record."""

    id: int = Field(..., description="Unique student identifier assigned at seed time")
    name: str = Field(..., description="Student name, matched exactly when creating groups")
