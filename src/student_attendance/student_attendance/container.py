from __future__ import annotations

from dataclasses import dataclass

from .attendance.events import EventPublisher
from .attendance.firestore_attendance_repository import FirestoreAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import FirestoreConfig, FirestoreConnection
from .media.uploader import CloudinaryConfig, CloudinaryPhotoUploader, PhotoUploader
from .reports.approval.reason_stated import ReasonStatedApprovalPolicy
from .reports.service import AttendanceReportService
from .students.firestore_student_repository import FirestoreStudentRepository
from .students.repository import StudentRepository
from .students.service import StudentService


@dataclass(frozen=True)
class Container:
    students_repo: StudentRepository
    attendance_repo: AttendanceRepository
    uploader: PhotoUploader
    publisher: EventPublisher

    student_service: StudentService
    attendance_service: AttendanceService
    report_service: AttendanceReportService


def wire(
    *,
    students_repo: StudentRepository,
    attendance_repo: AttendanceRepository,
    uploader: PhotoUploader,
    publisher: EventPublisher,
) -> Container:
    """Assemble services over the given adapters (tests pass in-memory ones)."""
    return Container(
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        uploader=uploader,
        publisher=publisher,
        student_service=StudentService(students_repo, uploader),
        attendance_service=AttendanceService(attendance_repo),
        report_service=AttendanceReportService(
            students_repo,
            attendance_repo,
            approval=ReasonStatedApprovalPolicy(),
        ),
    )


def build_container(*, firebase_config: dict, cloudinary_config: dict, publisher: EventPublisher) -> Container:
    config = FirestoreConfig(**{k: str(v) for k, v in firebase_config.items() if v})
    conn = FirestoreConnection.get_instance(config)

    uploader = CloudinaryPhotoUploader(
        CloudinaryConfig(
            cloud_name=str(cloudinary_config.get("cloud_name") or ""),
            api_key=str(cloudinary_config.get("api_key") or ""),
            api_secret=str(cloudinary_config.get("api_secret") or ""),
        )
    )

    return wire(
        students_repo=FirestoreStudentRepository(conn),
        attendance_repo=FirestoreAttendanceRepository(conn),
        uploader=uploader,
        publisher=publisher,
    )
