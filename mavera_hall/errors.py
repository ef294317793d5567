"""
Exceptions and error handling for the Mavera Hall application.
"""

import functools
from typing import Any, Dict, Optional

import structlog
from flask import Flask, jsonify, render_template, request
from werkzeug.exceptions import HTTPException

logger = structlog.get_logger("errors")


class MaveraHallError(Exception):
    """Base exception for all application errors."""

    status_code = 400

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(MaveraHallError):
    """Raised when there are configuration issues."""

    status_code = 500


class ValidationError(MaveraHallError):
    """Form or payload validation failed; carries per-field error keys."""

    def __init__(self, message: str, field_errors: Optional[Dict[str, str]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field_errors = field_errors or {}


class AuthenticationError(MaveraHallError):
    status_code = 401


class NotFoundError(MaveraHallError):
    status_code = 404


class BookingError(MaveraHallError):
    """Base class for booking rule violations."""


class BookingValidationError(BookingError, ValidationError):
    pass


class BookingConflictError(BookingError):
    """The requested slot overlaps another booking or a blocked day."""

    status_code = 409

    def __init__(self, message: str, conflicting_title: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.conflicting_title = conflicting_title


class InvalidTransitionError(BookingError):
    """A status change that the booking lifecycle does not allow."""

    status_code = 409


def with_error_handling(fn):
    """
    Log any exception raised by *fn*, then re-raise it unchanged.

    Application errors (rejected input, conflicts) are logged as warnings
    without a traceback; anything else is logged as an error.
    """

    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except MaveraHallError as e:
            logger.warning(
                "wrapped_function_rejected",
                function=fn.__qualname__,
                error=e.message,
                error_type=type(e).__name__,
            )
            raise
        except Exception as e:
            logger.error(
                "wrapped_function_failed",
                function=fn.__qualname__,
                error=str(e),
                error_type=type(e).__name__,
                args=[repr(a) for a in args] or None,
                exc_info=True,
            )
            raise

    return wrapper


def _wants_json() -> bool:
    return request.path.startswith("/api/") or request.path == "/health"


def register_error_handlers(app: Flask) -> None:

    @app.errorhandler(MaveraHallError)
    def handle_app_error(e: MaveraHallError):
        logger.warning("request_failed", error=e.message, error_type=type(e).__name__)
        if _wants_json():
            payload = {"error": e.message}
            if isinstance(e, ValidationError) and e.field_errors:
                payload["errors"] = e.field_errors
            return jsonify(payload), e.status_code
        return render_template("error.html", code=e.status_code, message=e.message), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        if _wants_json():
            return jsonify({"error": e.description}), e.code
        return render_template("error.html", code=e.code, message=None), e.code

    @app.errorhandler(500)
    def handle_server_error(e):
        logger.error("unhandled_error", error=str(getattr(e, "original_exception", e)))
        if _wants_json():
            return jsonify({"error": "Internal server error"}), 500
        return render_template("error.html", code=500, message=None), 500
