from __future__ import annotations

import csv
import io

from flask import Flask, jsonify, send_file

from ..common.http import request_payload, request_window
from ..container import Container
from .service import AttendanceWriteResult

HISTORY_CSV_FIELDS = ["Date", "Status", "Reason", "TimeIn", "TimeOut", "Location"]


def register(app: Flask, container: Container) -> None:
    def _publish(result: AttendanceWriteResult) -> None:
        for event in result.events:
            container.publisher.publish(event)

    def _write_history_csv(*, records, filename: str):
        """Write history rows to a CSV attachment response."""

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=HISTORY_CSV_FIELDS, extrasaction="ignore")
        writer.writeheader()
        for r in records:
            writer.writerow(r.to_dict())

        csv_bytes = io.BytesIO(out.getvalue().encode("utf-8-sig"))
        return send_file(csv_bytes, mimetype="text/csv", as_attachment=True, download_name=filename)

    @app.route("/attendance", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance():
        result = container.attendance_service.mark(request_payload())
        _publish(result)
        return jsonify({"id": result.record_id, "message": "Attendance recorded"})

    @app.route("/attendance/<record_id>", methods=["PUT"], endpoint="update_attendance")
    def update_attendance(record_id: str):
        result = container.attendance_service.update(record_id, request_payload())
        _publish(result)
        return jsonify({"message": "Attendance updated"})

    @app.route("/attendance/history/<regno>", methods=["GET"], endpoint="attendance_history")
    def attendance_history(regno: str):
        records = container.attendance_service.history(regno, window=request_window())
        return jsonify([r.to_dict() for r in records])

    @app.route("/attendance/history/<regno>/export", methods=["GET"], endpoint="export_attendance_history")
    def export_attendance_history(regno: str):
        records = container.attendance_service.history(regno, window=request_window())
        return _write_history_csv(records=records, filename=f"attendance_{regno}.csv")
