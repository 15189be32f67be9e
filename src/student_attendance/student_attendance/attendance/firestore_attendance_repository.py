from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Sequence

from google.api_core.exceptions import NotFound
from google.cloud.firestore_v1.base_query import FieldFilter
from google.cloud.firestore_v1.field_path import FieldPath

from ..core.enums import Collection
from ..database.connection import FirestoreConnection
from ..database.firestore_base import fetchall, store_call
from .model import AttendanceRecord, day_key_prefix
from .repository import AttendanceRepository


class FirestoreAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: FirestoreConnection):
        self._conn_factory = conn_factory

    def _collection(self):
        return self._conn_factory.client().collection(Collection.ATTENDANCE.value)

    @staticmethod
    def _records(docs) -> list[AttendanceRecord]:
        return [AttendanceRecord.from_document(doc_id, data) for doc_id, data in docs]

    def list_all(self) -> Sequence[AttendanceRecord]:
        with store_call("list attendance"):
            return self._records(fetchall(self._collection()))

    def list_for_reg_no(self, reg_no: str) -> Sequence[AttendanceRecord]:
        with store_call("attendance history"):
            query = self._collection().where(filter=FieldFilter("RegNo", "==", reg_no))
            return self._records(fetchall(query))

    def list_for_day(self, day: date) -> Sequence[AttendanceRecord]:
        prefix = day_key_prefix(day)
        col = self._collection()
        with store_call("daily attendance"):
            query = col.where(
                filter=FieldFilter(FieldPath.document_id(), ">=", col.document(prefix))
            ).where(
                filter=FieldFilter(FieldPath.document_id(), "<", col.document(prefix + "\uf8ff"))
            )
            return self._records(fetchall(query))

    def upsert(self, record_id: str, data: Mapping[str, Any]) -> None:
        with store_call("record attendance"):
            self._collection().document(record_id).set(dict(data), merge=True)

    def update(self, record_id: str, data: Mapping[str, Any]) -> bool:
        with store_call("update attendance"):
            try:
                self._collection().document(record_id).update(dict(data))
            except NotFound:
                return False
        return True
