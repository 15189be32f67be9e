from __future__ import annotations

from typing import Any

from flask import Flask, jsonify, request

from ..core.exceptions import NotFoundError, StoreError, ValidationError
from .datetime_utils import DateRange

def request_payload() -> dict[str, Any]:
    """Body fields from JSON, falling back to form/multipart fields."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()

def request_window() -> DateRange:
    return DateRange.from_args(request.args.get("start"), request.args.get("end"))

def register_error_handlers(app: Flask) -> None:
    """Translate domain errors into ``{"error": message}`` JSON responses."""

    @app.errorhandler(ValidationError)
    def _validation_error(e: ValidationError):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return jsonify({"error": str(e)}), 404

    @app.errorhandler(StoreError)
    def _store_error(e: StoreError):
        return jsonify({"error": str(e)}), 500
