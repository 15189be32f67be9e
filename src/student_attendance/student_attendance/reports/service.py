from __future__ import annotations

from datetime import date
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import DateRange, now_local
from ..students.repository import StudentRepository
from . import engine
from .approval.base import ApprovalPolicy
from .approval.reason_stated import ReasonStatedApprovalPolicy
from .model import DailySummary, OverallReport, TopBottomReport


class AttendanceReportService:
    """Fetches the collections in full and hands them to the report engine.

    No caching: every call recomputes from a fresh read.
    """

    def __init__(
        self,
        students: StudentRepository,
        attendance: AttendanceRepository,
        *,
        approval: Optional[ApprovalPolicy] = None,
    ):
        self._students = students
        self._attendance = attendance
        self._approval = approval or ReasonStatedApprovalPolicy()

    def _records(self, window: DateRange):
        records = self._attendance.list_all()
        if not window.bounded:
            return records
        return [r for r in records if window.contains(r.date)]

    def daily_summary(self, *, today: Optional[date] = None) -> DailySummary:
        today = today or now_local().date()
        records = self._attendance.list_for_day(today)
        return engine.summarize_day(len(self._students.list_all()), records)

    def overall(self, *, window: DateRange = DateRange()) -> OverallReport:
        students = self._students.list_all()
        return engine.build_overall_report(students, self._records(window), approval=self._approval)

    def top_bottom(self, *, window: DateRange = DateRange()) -> TopBottomReport:
        students = self._students.list_all()
        return engine.rank_students(students, self._records(window))

    def locations(self, *, window: DateRange = DateRange()) -> dict[str, int]:
        return engine.count_locations(self._records(window))
