"""Flask Routes (View Layer) — all HTTP endpoints."""

from __future__ import annotations

import json
import logging
import time
from typing import Any

from flask import Flask, g, jsonify, request
from werkzeug.exceptions import BadRequest, HTTPException

from app.models.schemas import ErrorResponse

logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "Cross-Origin-Resource-Policy": "same-origin",
}


def _error_response(status: int, error: str, message: str | None = None):
    body = ErrorResponse(error=error, message=message)
    return jsonify(body.model_dump(exclude_none=True)), status


def create_app(controller: Any = None, settings: Any = None) -> Flask:
    """Flask application factory (MVC pattern)."""
    if settings is None:
        settings = controller.settings if controller is not None else None
    if settings is None:
        from config import get_settings

        settings = get_settings()

    if controller is None:
        from app.controllers.processing_controller import ProcessingController

        controller = ProcessingController(settings)

    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = settings.max_content_length
    app.json.sort_keys = False

    # ── Request logging, CORS and security headers ───
    @app.before_request
    def start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def decorate_response(response):
        response.headers["Access-Control-Allow-Origin"] = settings.cors_origins
        response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
        response.headers["Access-Control-Allow-Headers"] = "Content-Type"
        for header, value in SECURITY_HEADERS.items():
            response.headers.setdefault(header, value)

        started = g.get("request_started")
        elapsed_ms = (time.perf_counter() - started) * 1000 if started else 0.0
        logger.info(
            "%s %s %s %d %.1fms",
            request.remote_addr,
            request.method,
            request.full_path.rstrip("?"),
            response.status_code,
            elapsed_ms,
        )
        return response

    # ── Error handlers ───────────────────────────────
    @app.errorhandler(404)
    def not_found(_error):
        return _error_response(
            404,
            "Route not found",
            f"Route {request.method} {request.path} not found",
        )

    @app.errorhandler(405)
    def method_not_allowed(_error):
        return _error_response(405, "Method not allowed")

    @app.errorhandler(413)
    def payload_too_large(_error):
        return _error_response(
            413,
            "Payload too large",
            f"Request body exceeds {settings.max_content_length} bytes",
        )

    @app.errorhandler(Exception)
    def internal_error(error):
        if isinstance(error, HTTPException):
            return _error_response(error.code or 500, error.name, error.description)
        logger.exception("Internal server error")
        message = str(error) if settings.expose_error_details else "Something went wrong"
        return _error_response(500, "Internal server error", message)

    # ── Routes ───────────────────────────────────────
    @app.route("/")
    def index():
        return jsonify(controller.api_info().model_dump())

    @app.route("/health")
    def health():
        return jsonify(controller.health().model_dump())

    @app.route("/process", methods=["POST", "OPTIONS"])
    def process():
        if request.method == "OPTIONS":
            return "", 204

        if not request.is_json:
            return _error_response(400, "JSON body is required")
        try:
            data = request.get_json()
        except BadRequest:
            return _error_response(400, "JSON body is required")

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Received request: %s", json.dumps(data, indent=2))

        result = controller.process(data).to_payload()

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Sending response: %s", json.dumps(result, indent=2))
        return jsonify(result)

    return app
