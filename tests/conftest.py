from __future__ import annotations

from datetime import date, datetime
from typing import Any, Mapping, Optional

import pytest

from src.student_attendance.student_attendance.attendance.events import RealtimeEvent
from src.student_attendance.student_attendance.attendance.model import AttendanceRecord, day_key_prefix
from src.student_attendance.student_attendance.container import wire
from src.student_attendance.student_attendance.students.model import StudentRecord


class InMemoryStudents:
    def __init__(self, docs: Optional[dict[str, dict]] = None):
        self._docs: dict[str, dict] = dict(docs or {})
        self._id = 0

    def list_all(self):
        return [StudentRecord.from_document(k, v) for k, v in self._docs.items()]

    def find(self, student_id: str):
        data = self._docs.get(student_id)
        return StudentRecord.from_document(student_id, data) if data is not None else None

    def create(self, data: Mapping[str, Any]) -> str:
        self._id += 1
        student_id = f"stu{self._id}"
        self._docs[student_id] = dict(data)
        return student_id

    def update(self, student_id: str, data: Mapping[str, Any]) -> bool:
        if student_id not in self._docs:
            return False
        self._docs[student_id].update(data)
        return True

    def delete(self, student_id: str) -> bool:
        return self._docs.pop(student_id, None) is not None

    def raw(self, student_id: str) -> dict:
        return self._docs[student_id]


class InMemoryAttendance:
    def __init__(self):
        self._docs: dict[str, dict] = {}

    def _records(self, items):
        return [AttendanceRecord.from_document(k, v) for k, v in items]

    def list_all(self):
        return self._records(self._docs.items())

    def list_for_reg_no(self, reg_no: str):
        return self._records((k, v) for k, v in self._docs.items() if v.get("RegNo") == reg_no)

    def list_for_day(self, day: date):
        prefix = day_key_prefix(day)
        return self._records((k, v) for k, v in self._docs.items() if k.startswith(prefix))

    def find(self, record_id: str):
        data = self._docs.get(record_id)
        return AttendanceRecord.from_document(record_id, data) if data is not None else None

    def upsert(self, record_id: str, data: Mapping[str, Any]) -> None:
        self._docs.setdefault(record_id, {}).update(data)

    def update(self, record_id: str, data: Mapping[str, Any]) -> bool:
        if record_id not in self._docs:
            return False
        self._docs[record_id].update(data)
        return True

    def raw(self, record_id: str) -> dict:
        return self._docs[record_id]

    def __len__(self):
        return len(self._docs)


class FakeUploader:
    def __init__(self, url: str = "https://res.cloudinary.com/demo/image/upload/photo.jpg"):
        self.url = url
        self.calls: list[dict] = []

    def upload(self, photo, *, folder=None) -> str:
        self.calls.append({"filename": photo.filename, "folder": folder, "content": photo.read()})
        return self.url


class RecordingPublisher:
    def __init__(self):
        self.events: list[RealtimeEvent] = []

    def publish(self, event: RealtimeEvent) -> None:
        self.events.append(event)


def make_student(doc_id: str, reg_no: str, department: str = "", name: str = "") -> StudentRecord:
    return StudentRecord(id=doc_id, reg_no=reg_no, name=name or reg_no, department=department)


def make_attendance(reg_no: str, day: str, status: str, **extra) -> AttendanceRecord:
    return AttendanceRecord(
        id=f"_{day.replace('-', '')}_{reg_no}",
        reg_no=reg_no,
        date=day,
        status=status,
        reason=extra.get("reason", ""),
        time_in=extra.get("time_in", ""),
        time_out=extra.get("time_out", ""),
        location=extra.get("location", ""),
    )


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 5, 9, 30, 0)


@pytest.fixture
def students_repo() -> InMemoryStudents:
    return InMemoryStudents()


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def uploader() -> FakeUploader:
    return FakeUploader()


@pytest.fixture
def publisher() -> RecordingPublisher:
    return RecordingPublisher()


@pytest.fixture
def container(students_repo, attendance_repo, uploader, publisher):
    return wire(
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        uploader=uploader,
        publisher=publisher,
    )


@pytest.fixture
def client(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.student_attendance.student_attendance.main import create_app

    app = create_app(container)
    return app.test_client()
