from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

# Document field names as stored in the students collection.
STUDENT_FIELDS = ("Name", "Gender", "RegNo", "Phone", "Email", "BloodGroup", "Department", "DOB")


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


@dataclass(frozen=True)
class StudentRecord:
    """Domain entity: a student document.

    Note: Plain data object, fields default to "" when the document lacks them.
    """

    id: str
    reg_no: str = ""
    name: str = ""
    department: str = ""
    phone: str = ""
    email: str = ""
    blood_group: str = ""
    gender: str = ""
    dob: str = ""
    photo: str = ""

    @classmethod
    def from_document(cls, doc_id: str, data: Mapping[str, Any]) -> "StudentRecord":
        return cls(
            id=doc_id,
            reg_no=_text(data.get("RegNo")),
            name=_text(data.get("Name")),
            department=_text(data.get("Department")),
            phone=_text(data.get("Phone")),
            email=_text(data.get("Email")),
            blood_group=_text(data.get("BloodGroup")),
            gender=_text(data.get("Gender")),
            dob=_text(data.get("DOB")),
            photo=_text(data.get("photo")),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "RegNo": self.reg_no,
            "Name": self.name,
            "Department": self.department,
            "Phone": self.phone,
            "Email": self.email,
            "BloodGroup": self.blood_group,
            "Gender": self.gender,
            "DOB": self.dob,
            "photo": self.photo,
        }
