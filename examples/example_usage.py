"""Example: use the service layer without Flask.

Controllers are a thin layer; the reports live in the services and engine.
"""

import importlib
import json

from dotenv import load_dotenv

from config import get_settings_module

from src.student_attendance.student_attendance.container import build_container
from src.student_attendance.student_attendance.realtime.channel import SocketIOEventPublisher, socketio


def main():
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        firebase_config=dict(settings.FIREBASE_CONFIG),
        cloudinary_config=dict(settings.CLOUDINARY_CONFIG),
        publisher=SocketIOEventPublisher(socketio),
    )
    print(json.dumps(container.report_service.overall().to_dict(), indent=2))
    print(json.dumps(container.report_service.top_bottom().to_dict(), indent=2))


if __name__ == "__main__":
    main()
