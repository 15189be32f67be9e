from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping

from ..core.constants import ATTENDANCE_KEY_PREFIX


def attendance_key(work_date: str, reg_no: str) -> str:
    """Deterministic document id: one attendance record per student per day.

    ``attendance_key("2024-03-05", "S1") == "_20240305_S1"``
    """
    return f"{ATTENDANCE_KEY_PREFIX}{work_date.replace('-', '')}_{reg_no}"


def day_key_prefix(day: date) -> str:
    """Key prefix shared by every record of ``day``."""
    return f"{ATTENDANCE_KEY_PREFIX}{day.strftime('%Y%m%d')}"


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student's attendance on one day.

    Values are kept as stored; normalization ("Unknown" buckets, time
    parsing) happens in the report engine.
    """

    id: str
    reg_no: str = ""
    date: str = ""
    status: str = ""
    reason: str = ""
    time_in: str = ""
    time_out: str = ""
    location: str = ""

    @classmethod
    def from_document(cls, doc_id: str, data: Mapping[str, Any]) -> "AttendanceRecord":
        return cls(
            id=doc_id,
            reg_no=_text(data.get("RegNo")),
            date=_text(data.get("Date")),
            status=_text(data.get("Status")),
            reason=_text(data.get("Reason")),
            time_in=_text(data.get("TimeIn")),
            time_out=_text(data.get("TimeOut")),
            location=_text(data.get("Location")),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "RegNo": self.reg_no,
            "Date": self.date,
            "Status": self.status,
            "Reason": self.reason,
            "TimeIn": self.time_in,
            "TimeOut": self.time_out,
            "Location": self.location,
        }
