"""
Structured logging for the Mavera Hall application.

Also hosts the request hooks that record navigation analytics (one
``page_view`` event per request, tagged with a correlation id).
"""

import logging
import sys
import time
import uuid
from typing import Optional

import structlog
from flask import Flask, g, request
from rich.console import Console
from rich.logging import RichHandler


def new_correlation_id() -> str:
    return str(uuid.uuid4())[:8]


def setup_logging(debug: bool = False, json_output: bool = False) -> None:
    """
    Configure structlog and the standard library root logger.

    Args:
        debug: Enable debug level logging
        json_output: Emit JSON lines instead of rich console output
    """
    level = logging.DEBUG if debug else logging.INFO

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="ISO"),
        structlog.dev.set_exc_info,
    ]

    if json_output:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer(ensure_ascii=False))
        logging.basicConfig(level=level, format="%(message)s", stream=sys.stdout)
    else:
        console = Console(stderr=True)
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=console.is_terminal,
                exception_formatter=structlog.dev.rich_traceback,
            )
        )
        logging.basicConfig(
            level=level,
            format="%(message)s",
            datefmt="[%X]",
            handlers=[RichHandler(console=console, show_path=False)],
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        # console mode writes next to the rich handler, on stderr
        logger_factory=structlog.WriteLoggerFactory(file=sys.stdout if json_output else sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a logger instance with the given name."""
    return structlog.get_logger(name)


init_logger = structlog.get_logger("init")
navigation_logger = structlog.get_logger("navigation")


def log_application_initialized(app: Flask) -> None:
    """Record the facts a deploy usually needs to confirm at startup."""
    uri = app.config.get("SQLALCHEMY_DATABASE_URI", "")
    init_logger.info(
        "application_initialized",
        database=uri.split(":", 1)[0],
        timezone=app.config.get("APP_TIMEZONE"),
        default_language=app.config.get("DEFAULT_LANGUAGE"),
        debug=app.debug,
    )


def _skip(path: Optional[str]) -> bool:
    return not path or path.startswith("/static/")


def init_request_logging(app: Flask) -> None:
    """Install the navigation analytics hooks on *app*."""

    @app.before_request
    def _bind_request_context():
        if _skip(request.path):
            return
        g.request_started = time.perf_counter()
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            correlation_id=request.headers.get("X-Correlation-ID") or new_correlation_id(),
            method=request.method,
            path=request.path,
        )

    @app.after_request
    def _log_page_view(response):
        started = g.pop("request_started", None)
        if started is None:
            return response
        duration_ms = round((time.perf_counter() - started) * 1000, 2)
        navigation_logger.info(
            "page_view",
            status=response.status_code,
            language=g.get("lang"),
            duration_ms=duration_ms,
        )
        correlation_id = structlog.contextvars.get_contextvars().get("correlation_id")
        if correlation_id:
            response.headers["X-Correlation-ID"] = correlation_id
        return response

    @app.teardown_request
    def _clear_request_context(exc):
        structlog.contextvars.clear_contextvars()
