"""Attendance aggregation.

Pure functions over already-fetched records: nothing here performs I/O and
every result is a fresh immutable report object.
"""
from __future__ import annotations

from collections import Counter, defaultdict
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import format_hms, parse_clock
from ..common.validators import or_default, safe_date, safe_string
from ..core.constants import NOT_AVAILABLE, RANKING_SIZE, UNKNOWN, ZERO_RATE
from ..core.enums import AttendanceStatus
from ..students.model import StudentRecord
from .approval.base import ApprovalPolicy
from .approval.reason_stated import ReasonStatedApprovalPolicy
from .model import DailySummary, OverallReport, RankedStudent, TopBottomReport


CENTS = Decimal("0.01")


def two_places(value: float) -> Decimal:
    """Round to 2 decimals with ties going up.

    Decimal(value) is the exact binary value of the float, so 0.125 rounds to
    0.13 while 0.1249999... stays at 0.12.
    """
    return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def rate(part: int, whole: int) -> str:
    """``100 * part / whole`` as a 2-decimal string, "0.00" when whole is 0."""
    if whole <= 0:
        return ZERO_RATE
    return str(two_places(part / whole * 100))


def worked_span(record: AttendanceRecord) -> Optional[tuple[int, int]]:
    """(arrival seconds, duration seconds) for a usable same-day TimeIn/TimeOut pair."""
    time_in = parse_clock(record.time_in)
    time_out = parse_clock(record.time_out)
    if time_in is None or time_out is None or time_out < time_in:
        return None
    return time_in, time_out - time_in


def summarize_day(total_students: int, records: Iterable[AttendanceRecord]) -> DailySummary:
    present = absent = 0
    reasons: Counter[str] = Counter()

    for r in records:
        status = safe_string(r.status)
        if status == AttendanceStatus.PRESENT.value:
            present += 1
        elif status == AttendanceStatus.ABSENT.value:
            absent += 1
            reasons[or_default(r.reason, UNKNOWN)] += 1

    return DailySummary(
        total_students=total_students,
        present=present,
        absent=absent,
        absent_with_reasons=dict(reasons),
    )


def build_overall_report(
    students: Sequence[StudentRecord],
    records: Iterable[AttendanceRecord],
    *,
    approval: Optional[ApprovalPolicy] = None,
) -> OverallReport:
    approval = approval or ReasonStatedApprovalPolicy()
    total_students = len(students)

    reg_to_dept: dict[str, str] = {}
    dept_sizes: Counter[str] = Counter()
    for s in students:
        dept = or_default(s.department, UNKNOWN)
        reg = safe_string(s.reg_no)
        if reg:
            reg_to_dept[reg] = dept
        dept_sizes[dept] += 1

    academic_days: set[str] = set()
    month_days: dict[str, set[str]] = defaultdict(set)
    month_present: Counter[str] = Counter()
    dept_present: Counter[str] = Counter()
    reasons: Counter[str] = Counter()

    total_present = total_absent = approved = unapproved = 0
    arrival_sum = duration_sum = timed_present = 0

    for r in records:
        day = safe_date(r.date)
        status = safe_string(r.status)

        if day:
            academic_days.add(day)
            month_days[day[:7]].add(day)

        if status == AttendanceStatus.PRESENT.value:
            total_present += 1
            dept_present[reg_to_dept.get(safe_string(r.reg_no), UNKNOWN)] += 1
            if day:
                month_present[day[:7]] += 1

            span = worked_span(r)
            if span is not None:
                arrival_sum += span[0]
                duration_sum += span[1]
                timed_present += 1

        elif status == AttendanceStatus.ABSENT.value:
            total_absent += 1
            reason = or_default(r.reason, UNKNOWN)
            reasons[reason] += 1
            if approval.is_approved(reason):
                approved += 1
            else:
                unapproved += 1

    total_days = len(academic_days)
    total_possible = total_students * total_days

    if timed_present:
        average_arrival = format_hms(arrival_sum / timed_present)
        average_hours = str(two_places(duration_sum / timed_present / 3600))
    else:
        average_arrival = average_hours = NOT_AVAILABLE

    return OverallReport(
        total_students=total_students,
        total_academic_days=total_days,
        total_days_present=total_present,
        total_days_absent=total_absent,
        approved_leaves=approved,
        unapproved_absences=unapproved,
        average_arrival_time=average_arrival,
        average_hours_attended=average_hours,
        attendance_rate=rate(total_present, total_possible),
        absenteeism_rate=rate(total_absent, total_possible),
        attendance_by_dept={
            dept: rate(dept_present[dept], size * total_days) for dept, size in dept_sizes.items()
        },
        absence_reasons=dict(reasons),
        monthly_trends={
            month: rate(month_present[month], total_students * len(days)) for month, days in month_days.items()
        },
    )


def attendance_percentage(records: Sequence[AttendanceRecord]) -> float:
    if not records:
        return 0.0
    present = sum(1 for r in records if r.status == AttendanceStatus.PRESENT.value)
    return float(two_places(present / len(records) * 100))


def rank_students(
    students: Sequence[StudentRecord],
    records: Iterable[AttendanceRecord],
    *,
    size: int = RANKING_SIZE,
) -> TopBottomReport:
    """Best and worst attendance percentages.

    ``top`` reads best-first; ``bottom`` is the tail of the same ordering
    reversed, so it reads worst-first. With fewer than ``2 * size`` students
    the two lists overlap.
    """
    by_reg: dict[str, list[AttendanceRecord]] = defaultdict(list)
    for r in records:
        by_reg[r.reg_no].append(r)

    ranked = [
        RankedStudent(student=s, percentage=attendance_percentage(by_reg.get(s.reg_no, [])))
        for s in students
        if safe_string(s.reg_no)
    ]
    # sorted() is stable, so ties keep store order.
    ranked = sorted(ranked, key=lambda x: x.percentage, reverse=True)

    return TopBottomReport(top=tuple(ranked[:size]), bottom=tuple(reversed(ranked[-size:])))


def count_locations(records: Iterable[AttendanceRecord]) -> dict[str, int]:
    return dict(Counter(or_default(r.location, UNKNOWN) for r in records))
