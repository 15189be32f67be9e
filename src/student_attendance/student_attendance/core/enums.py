from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance status values as stored in the attendance collection."""

    PRESENT = "Present"
    ABSENT = "Absent"


class Collection(str, Enum):
    """Firestore collection names."""

    STUDENTS = "students"
    ATTENDANCE = "attendance"
