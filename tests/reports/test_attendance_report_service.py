from __future__ import annotations

from datetime import date

from conftest import InMemoryAttendance, InMemoryStudents

from src.student_attendance.student_attendance.common.datetime_utils import DateRange
from src.student_attendance.student_attendance.reports.service import AttendanceReportService


def _seed():
    students = InMemoryStudents(
        {
            "s1": {"RegNo": "A", "Name": "Ann", "Department": "CS"},
            "s2": {"RegNo": "B", "Name": "Ben", "Department": "EE"},
        }
    )
    attendance = InMemoryAttendance()
    attendance.upsert("_20240304_A", {"RegNo": "A", "Date": "2024-03-04", "Status": "Present", "Location": "Lab"})
    attendance.upsert("_20240305_A", {"RegNo": "A", "Date": "2024-03-05", "Status": "Present", "Location": "Lab"})
    attendance.upsert("_20240305_B", {"RegNo": "B", "Date": "2024-03-05", "Status": "Absent", "Reason": "Sick"})
    return students, attendance


def test_daily_summary_only_counts_todays_keys(fixed_now):
    students, attendance = _seed()
    svc = AttendanceReportService(students, attendance)

    summary = svc.daily_summary(today=fixed_now.date())

    assert summary.to_dict() == {
        "totalStudents": 2,
        "present": 1,
        "absent": 1,
        "absentWithReasons": {"Sick": 1},
    }


def test_overall_over_full_history():
    svc = AttendanceReportService(*_seed())

    report = svc.overall()

    assert report.total_academic_days == 2
    assert report.total_days_present == 2
    assert report.attendance_rate == "50.00"
    assert report.attendance_by_dept == {"CS": "100.00", "EE": "0.00"}


def test_window_restricts_records_before_aggregation():
    svc = AttendanceReportService(*_seed())
    window = DateRange(start=date(2024, 3, 5), end=date(2024, 3, 5))

    report = svc.overall(window=window)
    locations = svc.locations(window=window)

    assert report.total_academic_days == 1
    assert report.attendance_rate == "50.00"
    assert locations == {"Lab": 1, "Unknown": 1}


def test_top_bottom_groups_single_fetch():
    students, attendance = _seed()

    class CountingAttendance(InMemoryAttendance):
        def __init__(self, inner):
            super().__init__()
            self._docs = inner._docs
            self.full_fetches = 0

        def list_all(self):
            self.full_fetches += 1
            return super().list_all()

        def list_for_reg_no(self, reg_no):
            raise AssertionError("ranking must not fetch per student")

    counting = CountingAttendance(attendance)
    svc = AttendanceReportService(students, counting)

    report = svc.top_bottom().to_dict()

    assert counting.full_fetches == 1
    assert [s["RegNo"] for s in report["top5"]] == ["A", "B"]
    assert report["top5"][0]["percentage"] == 100.0
    assert report["bottom5"][0]["RegNo"] == "B"
