from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import request_window
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/attendance/summary", methods=["GET"], endpoint="attendance_summary")
    def attendance_summary():
        return jsonify(container.report_service.daily_summary().to_dict())

    @app.route("/attendance/overall", methods=["GET"], endpoint="attendance_overall")
    def attendance_overall():
        return jsonify(container.report_service.overall(window=request_window()).to_dict())

    @app.route("/attendance/topbottom", methods=["GET"], endpoint="attendance_topbottom")
    def attendance_topbottom():
        return jsonify(container.report_service.top_bottom(window=request_window()).to_dict())

    @app.route("/attendance/locations", methods=["GET"], endpoint="attendance_locations")
    def attendance_locations():
        return jsonify(container.report_service.locations(window=request_window()))
