"""
Error types raised by the registry service.

Services raise these and endpoints translate them into HTTP
responses.  All of them derive from ``ValueError`` so callers that
only care about "bad input" can catch that.
"""

from typing import List


class RegistryError(ValueError):
    """Base class for registry failures scoped to a single request."""


class InvalidMemberError(RegistryError):
    """A member name given to ``create_group`` matched no student."""

    def __init__(self, names: List[str]) -> None:
        self.names = list(names)
        super().__init__(f"Unknown member names: {', '.join(self.names)}")


class GroupNotFoundError(RegistryError):
    """No group exists with the requested id."""

    def __init__(self, group_id: int) -> None:
        self.group_id = group_id
        super().__init__(f"Group {group_id} not found")
