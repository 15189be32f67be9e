from __future__ import annotations

import importlib
import json
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.student_attendance.student_attendance.attendance.events import RealtimeEvent
from src.student_attendance.student_attendance.container import build_container


class _NoBroadcast:
    def publish(self, event: RealtimeEvent) -> None:
        pass


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        firebase_config=dict(settings.FIREBASE_CONFIG),
        cloudinary_config=dict(settings.CLOUDINARY_CONFIG),
        publisher=_NoBroadcast(),
    )

    seed_path = REPO_ROOT / "database" / "seed.json"
    seed = json.loads(seed_path.read_text(encoding="utf-8"))

    for student in seed["students"]:
        container.students_repo.create(student)
    for record in seed["attendance"]:
        container.attendance_service.mark(record)

    print(
        "OK: Seeded Firestore -> "
        f"{settings.FIREBASE_CONFIG.get('project_id')} "
        f"({len(seed['students'])} students, {len(seed['attendance'])} attendance records)"
    )


if __name__ == "__main__":
    main()
