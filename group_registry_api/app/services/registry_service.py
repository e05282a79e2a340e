"""
Service layer for the student and group registry.

The registry owns two in‑memory collections: students, seeded once
and never changed, and group summaries, which are appended by
``create_group`` and filtered by ``delete_group``.  Nothing is
persisted; a fresh ``RegistryService`` always starts from the seed
data below.

Every method takes the instance lock for its whole body so the
collections are never observed half‑mutated, even when the ASGI
server dispatches handlers from a thread pool.  No method awaits
while holding the lock.
"""

from __future__ import annotations

import logging
import threading
from typing import Iterable, List, Optional, Sequence

from group_registry_api.app.core.errors import GroupNotFoundError, InvalidMemberError
from group_registry_api.app.schemas.group import GroupDetail, GroupSummary
from group_registry_api.app.schemas.student import StudentRead


logger = logging.getLogger(__name__)


SEED_STUDENTS = [
    {"id": 1, "name": "Alice"},
    {"id": 2, "name": "Bob"},
    {"id": 3, "name": "Charlie"},
    {"id": 4, "name": "David"},
    {"id": 5, "name": "Eve"},
]

SEED_GROUPS = [
    {"id": 1, "groupName": "Group 1", "members": [1, 2, 4]},
    {"id": 2, "groupName": "Group 2", "members": [3, 5]},
]


class RegistryService:
    """In‑memory holder of students and groups."""

    def __init__(
        self,
        students: Optional[Iterable[dict]] = None,
        groups: Optional[Iterable[dict]] = None,
    ) -> None:
        """Build a registry from seed records.

        ``students`` and ``groups`` default to the standard seed data.
        Records are plain dicts using the wire field names.
        """
        self._lock = threading.Lock()
        self._students: List[StudentRead] = [
            StudentRead(**record) for record in (SEED_STUDENTS if students is None else students)
        ]
        self._groups: List[GroupSummary] = [
            GroupSummary(**record) for record in (SEED_GROUPS if groups is None else groups)
        ]

    @property
    def student_count(self) -> int:
        return len(self._students)

    @property
    def group_count(self) -> int:
        return len(self._groups)

    async def list_students(self) -> List[StudentRead]:
        """Return all students in seed order."""
        with self._lock:
            return list(self._students)

    async def list_groups(self) -> List[GroupSummary]:
        """Return all group summaries in insertion order."""
        with self._lock:
            return list(self._groups)

    async def create_group(self, group_name: str, member_names: Sequence[str]) -> GroupSummary:
        """Create a group from student names and return its summary.

        Each name resolves to the first student with exactly that
        name.  If any name is unknown, ``InvalidMemberError`` is
        raised and the collection is left as it was.  The new id is
        the current number of groups plus one, so an id freed by a
        deletion can be handed out again.
        """
        with self._lock:
            member_ids: List[Optional[int]] = [self._find_student_id(name) for name in member_names]
            unknown = [name for name, member_id in zip(member_names, member_ids) if member_id is None]
            if unknown:
                logger.warning("Rejected group %r: unknown members %s", group_name, unknown)
                raise InvalidMemberError(unknown)
            group = GroupSummary(
                id=len(self._groups) + 1,
                groupName=group_name,
                members=member_ids,
            )
            self._groups.append(group)
        logger.info("Created group %s (%r) with %d members", group.id, group.group_name, len(group.members))
        return group

    async def delete_group(self, group_id: int) -> bool:
        """Remove every group with ``group_id``.

        Deleting an id that does not exist is not an error.  Returns
        ``True`` if at least one group was removed.
        """
        with self._lock:
            remaining = [group for group in self._groups if group.id != group_id]
            removed = len(self._groups) - len(remaining)
            self._groups = remaining
        if removed:
            logger.info("Deleted group %s", group_id)
        else:
            logger.debug("Delete of unknown group %s ignored", group_id)
        return removed > 0

    async def get_group_detail(self, group_id: int) -> GroupDetail:
        """Return the first group with ``group_id`` with members resolved.

        Member ids with no matching student are dropped from the
        result.  Raises ``GroupNotFoundError`` if no group matches.
        """
        with self._lock:
            group = next((g for g in self._groups if g.id == group_id), None)
            if group is None:
                raise GroupNotFoundError(group_id)
            students = [self._find_student(member_id) for member_id in group.members]
        return GroupDetail(
            id=group.id,
            groupName=group.group_name,
            members=[student for student in students if student is not None],
        )

    def _find_student_id(self, name: str) -> Optional[int]:
        for student in self._students:
            if student.name == name:
                return student.id
        return None

    def _find_student(self, student_id: int) -> Optional[StudentRead]:
        for student in self._students:
            if student.id == student_id:
                return student
        return None
