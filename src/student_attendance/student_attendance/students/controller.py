from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import request_payload
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/students", methods=["GET"], endpoint="list_students")
    def list_students():
        students = container.student_service.list_students()
        return jsonify([s.to_dict() for s in students])

    @app.route("/students/search", methods=["GET"], endpoint="search_students")
    def search_students():
        results = container.student_service.search(request.args.get("q", ""))
        return jsonify([s.to_dict() for s in results])

    @app.route("/students", methods=["POST"], endpoint="add_student")
    def add_student():
        student_id = container.student_service.add_student(request_payload(), request.files.get("photo"))
        return jsonify({"id": student_id, "message": "Student added"})

    @app.route("/students/<student_id>", methods=["PUT"], endpoint="update_student")
    def update_student(student_id: str):
        container.student_service.update_student(student_id, request_payload(), request.files.get("photo"))
        return jsonify({"message": "Student updated"})

    @app.route("/students/<student_id>", methods=["DELETE"], endpoint="delete_student")
    def delete_student(student_id: str):
        container.student_service.delete_student(student_id)
        return jsonify({"message": "Student deleted"})
