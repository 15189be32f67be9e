from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_reg_no(self, reg_no: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_day(self, day: date) -> Sequence[AttendanceRecord]:
        """Records whose key carries ``day``'s date prefix."""

        raise NotImplementedError

    def upsert(self, record_id: str, data: Mapping[str, Any]) -> None:
        """Create or merge into the document at ``record_id``."""

        raise NotImplementedError

    def update(self, record_id: str, data: Mapping[str, Any]) -> bool:
        """Merge fields into an existing record; False when it does not exist."""

        raise NotImplementedError
