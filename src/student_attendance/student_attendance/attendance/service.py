from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from ..common.datetime_utils import DateRange
from ..common.validators import require_fields
from ..core.exceptions import NotFoundError, ValidationError
from .events import ATTENDANCE_UPDATED, RealtimeEvent
from .model import AttendanceRecord, attendance_key
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("RegNo", "Date", "Status")
OPTIONAL_FIELDS = ("Reason", "TimeIn", "TimeOut", "Location")


@dataclass(frozen=True)
class AttendanceWriteResult:
    """Outcome of a write: the record id plus the events the caller must publish."""

    record_id: str
    events: tuple[RealtimeEvent, ...] = field(default=(ATTENDANCE_UPDATED,))


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def mark(self, payload: Mapping[str, Any]) -> AttendanceWriteResult:
        """Record one student's attendance for a day (idempotent per RegNo + Date)."""
        require_fields(payload, REQUIRED_FIELDS)

        reg_no, work_date, status = (payload[f] for f in REQUIRED_FIELDS)
        record_id = attendance_key(work_date, reg_no)
        data = {"RegNo": reg_no, "Date": work_date, "Status": status}
        data.update({f: payload.get(f) or "" for f in OPTIONAL_FIELDS})

        self._attendance.upsert(record_id, data)
        logger.info("Attendance %s recorded (%s)", record_id, status)
        return AttendanceWriteResult(record_id=record_id)

    def update(self, record_id: str, payload: Mapping[str, Any]) -> AttendanceWriteResult:
        data = {k: v for k, v in payload.items() if k != "id"}
        if not data:
            raise ValidationError("No fields to update")

        if not self._attendance.update(record_id, data):
            raise NotFoundError(f"Attendance {record_id} not found")
        logger.info("Attendance %s updated (%s)", record_id, ", ".join(sorted(data)))
        return AttendanceWriteResult(record_id=record_id)

    def history(self, reg_no: str, *, window: DateRange = DateRange()) -> Sequence[AttendanceRecord]:
        """All records for ``reg_no`` in store order, optionally limited to ``window``."""
        records = self._attendance.list_for_reg_no(reg_no)
        return [r for r in records if window.contains(r.date)]
