from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from werkzeug.datastructures import FileStorage

from ..core.constants import STUDENT_PHOTO_FOLDER
from ..core.exceptions import NotFoundError, ValidationError
from ..media.uploader import PhotoUploader
from .model import STUDENT_FIELDS, StudentRecord
from .repository import StudentRepository

logger = logging.getLogger(__name__)


class StudentService:
    """Use cases: list/search/add/edit/delete students.

    Deletion is a hard delete: the document is removed from the collection.
    """

    def __init__(self, students: StudentRepository, uploader: PhotoUploader):
        self._students = students
        self._uploader = uploader

    def list_students(self) -> Sequence[StudentRecord]:
        return self._students.list_all()

    def search(self, query: str) -> Sequence[StudentRecord]:
        q = (query or "").strip().lower()
        if not q:
            return []
        return [s for s in self._students.list_all() if q in s.reg_no.lower() or q in s.name.lower()]

    def add_student(self, form: Mapping[str, Any], photo: Optional[FileStorage] = None) -> str:
        data = {f: form.get(f) or "" for f in STUDENT_FIELDS}
        data["photo"] = self._upload(photo, folder=STUDENT_PHOTO_FOLDER) if photo else ""
        student_id = self._students.create(data)
        logger.info("Student %s added (RegNo=%s)", student_id, data.get("RegNo"))
        return student_id

    def update_student(self, student_id: str, form: Mapping[str, Any], photo: Optional[FileStorage] = None) -> None:
        data = dict(form)
        data.pop("id", None)
        if photo:
            data["photo"] = self._upload(photo)
        if not data:
            raise ValidationError("No fields to update")

        if not self._students.update(student_id, data):
            raise NotFoundError(f"Student {student_id} not found")
        logger.info("Student %s updated (%s)", student_id, ", ".join(sorted(data)))

    def delete_student(self, student_id: str) -> None:
        if not self._students.delete(student_id):
            raise NotFoundError(f"Student {student_id} not found")
        logger.info("Student %s deleted", student_id)

    def _upload(self, photo: FileStorage, *, folder: Optional[str] = None) -> str:
        return self._uploader.upload(photo, folder=folder)
