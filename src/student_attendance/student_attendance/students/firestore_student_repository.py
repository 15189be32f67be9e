from __future__ import annotations

from typing import Any, Mapping, Sequence

from google.api_core.exceptions import NotFound

from ..core.enums import Collection
from ..database.connection import FirestoreConnection
from ..database.firestore_base import fetchall, store_call
from .model import StudentRecord
from .repository import StudentRepository


class FirestoreStudentRepository(StudentRepository):
    def __init__(self, conn_factory: FirestoreConnection):
        self._conn_factory = conn_factory

    def _collection(self):
        return self._conn_factory.client().collection(Collection.STUDENTS.value)

    def list_all(self) -> Sequence[StudentRecord]:
        with store_call("list students"):
            docs = fetchall(self._collection())
        return [StudentRecord.from_document(doc_id, data) for doc_id, data in docs]

    def create(self, data: Mapping[str, Any]) -> str:
        with store_call("add student"):
            _, ref = self._collection().add(dict(data))
        return ref.id

    def update(self, student_id: str, data: Mapping[str, Any]) -> bool:
        with store_call("update student"):
            try:
                self._collection().document(student_id).update(dict(data))
            except NotFound:
                return False
        return True

    def delete(self, student_id: str) -> bool:
        with store_call("delete student"):
            ref = self._collection().document(student_id)
            if not ref.get().exists:
                return False
            ref.delete()
        return True
