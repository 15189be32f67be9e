from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from ..students.model import StudentRecord


@dataclass(frozen=True)
class DailySummary:
    total_students: int
    present: int
    absent: int
    absent_with_reasons: Mapping[str, int]

    def to_dict(self) -> dict:
        return {
            "totalStudents": self.total_students,
            "present": self.present,
            "absent": self.absent,
            "absentWithReasons": dict(self.absent_with_reasons),
        }


@dataclass(frozen=True)
class OverallReport:
    """Full-history statistics; rates are 2-decimal strings as shown on the dashboard."""

    total_students: int
    total_academic_days: int
    total_days_present: int
    total_days_absent: int
    approved_leaves: int
    unapproved_absences: int
    average_arrival_time: str
    average_hours_attended: str
    attendance_rate: str
    absenteeism_rate: str
    attendance_by_dept: Mapping[str, str]
    absence_reasons: Mapping[str, int]
    monthly_trends: Mapping[str, str]

    @property
    def total_possible(self) -> int:
        return self.total_students * self.total_academic_days

    def to_dict(self) -> dict:
        return {
            "totalStudents": self.total_students,
            "totalAcademicDays": self.total_academic_days,
            "totalDaysPresent": self.total_days_present,
            "totalDaysAbsent": self.total_days_absent,
            "approvedLeaves": self.approved_leaves,
            "unapprovedAbsences": self.unapproved_absences,
            "averageArrivalTime": self.average_arrival_time,
            "averageHoursAttended": self.average_hours_attended,
            "attendanceRate": self.attendance_rate,
            "absenteeismRate": self.absenteeism_rate,
            "attendanceByDept": dict(self.attendance_by_dept),
            "absenceReasons": dict(self.absence_reasons),
            "monthlyTrends": dict(self.monthly_trends),
        }


@dataclass(frozen=True)
class RankedStudent:
    student: StudentRecord
    percentage: float

    def to_dict(self) -> dict:
        return {**self.student.to_dict(), "percentage": self.percentage}


@dataclass(frozen=True)
class TopBottomReport:
    top: tuple[RankedStudent, ...]
    bottom: tuple[RankedStudent, ...]

    def to_dict(self) -> dict:
        return {
            "top5": [r.to_dict() for r in self.top],
            "bottom5": [r.to_dict() for r in self.bottom],
        }
