from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence

from .model import StudentRecord


class StudentRepository(Protocol):
    """Repository interface for students.

    Note: the service layer depends on this interface, not on Firestore directly.
    """

    def list_all(self) -> Sequence[StudentRecord]:
        raise NotImplementedError

    def create(self, data: Mapping[str, Any]) -> str:
        raise NotImplementedError

    def update(self, student_id: str, data: Mapping[str, Any]) -> bool:
        """Partial update; False when the document does not exist."""

        raise NotImplementedError

    def delete(self, student_id: str) -> bool:
        raise NotImplementedError
