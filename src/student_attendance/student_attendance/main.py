from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.http import register_error_handlers
from .container import Container, build_container
from .realtime.channel import SocketIOEventPublisher, socketio
from .reports.controller import register as register_reports
from .students.controller import register as register_students

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["PORT"] = int(getattr(settings, "PORT", 3000))
    app.config["MAX_CONTENT_LENGTH"] = getattr(settings, "MAX_CONTENT_LENGTH", None)

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    cors_origins = getattr(settings, "CORS_ORIGINS", "*")
    CORS(app, origins=cors_origins)
    socketio.init_app(app, cors_allowed_origins=cors_origins)

    if container is None:
        firebase_config = dict(getattr(settings, "FIREBASE_CONFIG"))
        container = build_container(
            firebase_config=firebase_config,
            cloudinary_config=dict(getattr(settings, "CLOUDINARY_CONFIG")),
            publisher=SocketIOEventPublisher(socketio),
        )
        logger.info("settings=%s firebase project=%s", settings_module, firebase_config.get("project_id"))

    register_error_handlers(app)

    @app.route("/", endpoint="health")
    def health():
        return "Attendance backend is running (Firestore + Cloudinary)."

    register_students(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    return app
