from __future__ import annotations

import logging

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..container import Container
from ..core.constants import SKIPPED_RECORDS_HEADER
from ..core.enums import ErrorCode
from ..core.exceptions import DomainError, InvalidArgumentError

logger = logging.getLogger(__name__)


def _error_response(code: ErrorCode, message: str, status: int):
    return jsonify({"success": False, "code": code.value, "message": message}), status


def _string_field(data: dict, name: str) -> str:
    """Missing or null fields pass through as "" so the required-field check reports them."""
    value = data.get(name)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{name} must be a string")
    return value


def _code_for_status(status: int) -> ErrorCode:
    # Any other 4xx from routing (405 wrong method included) is a caller error.
    if status == 404:
        return ErrorCode.NOT_FOUND
    if status >= 500:
        return ErrorCode.INTERNAL
    return ErrorCode.INVALID_ARGUMENT


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        return _error_response(e.code, e.message, e.http_status)

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        # Routing errors raised by Flask itself (unknown path, wrong method).
        status = int(e.code or 500)
        return _error_response(_code_for_status(status), e.description or e.name, status)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return _error_response(ErrorCode.INTERNAL, "internal server error", 500)

    @app.route("/healthz", methods=["GET"], endpoint="healthz")
    def healthz():
        return jsonify({"status": "ok"}), 200

    @app.route("/v1/checkin", methods=["POST"], endpoint="checkin")
    def checkin():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return _error_response(ErrorCode.INVALID_ARGUMENT, "invalid json body", 400)

        view = service.check_in(_string_field(data, "user_id"), _string_field(data, "username"))
        return jsonify(view.to_dict()), 200

    @app.route("/v1/checkout/<record_id>", methods=["PUT"], endpoint="checkout")
    def checkout(record_id: str):
        view = service.check_out(record_id)
        return jsonify(view.to_dict()), 200

    @app.route("/v1/attendance/<user_id>", methods=["GET"], endpoint="get_attendance")
    def get_attendance(user_id: str):
        view = service.get_attendance(user_id)
        return jsonify(view.to_dict()), 200

    @app.route("/v1/attendance", methods=["GET"], endpoint="get_all_attendance")
    def get_all_attendance():
        listing = service.get_all_attendance()
        response = jsonify([v.to_dict() for v in listing.records])
        response.headers[SKIPPED_RECORDS_HEADER] = str(listing.skipped)
        return response, 200
