"""
Failure types and the response classifier for the frontend.

The task API client never lets a raw ``requests`` exception escape. Every
failure is translated at that boundary into one of a small, closed set of
variants:

- :class:`RemoteRejected` -- the task API answered with an error status.
- :class:`NoResponseReceived` -- the request went out but nothing came back
  (connection refused, DNS failure, timeout).
- :class:`MalformedRequest` -- the request could not be built or sent.

Route handlers do not catch these. They propagate to the application error
handlers registered by :func:`register_error_handlers`, which hand them to
:func:`classify_error` -- the single place that decides what status code,
title and message the user sees.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from flask import Flask, jsonify, render_template, request
from werkzeug.exceptions import HTTPException, NotFound

logger = logging.getLogger(__name__)

GENERIC_TITLE = "Something went wrong"
GENERIC_MESSAGE = "An unexpected error occurred. Please try again."
NOT_FOUND_TITLE = "Task not found"
NOT_FOUND_MESSAGE = "The task you are looking for could not be found."
REJECTED_TITLE = "Error"
REJECTED_DEFAULT_MESSAGE = "An error occurred"
UNAVAILABLE_TITLE = "Service unavailable"
UNAVAILABLE_MESSAGE = "Unable to connect to the task service. Please try again later."
PAGE_NOT_FOUND_TITLE = "Page not found"
PAGE_NOT_FOUND_MESSAGE = "The page you are looking for could not be found."

# Endpoints that answer with JSON rather than an HTML page, so their
# failures are reported as JSON too.
JSON_ENDPOINTS = {"views.health_check", "views.update_status"}


class TaskApiError(Exception):
    """Base class for every failure raised by the task API client."""


class RemoteRejected(TaskApiError):
    """
    The task API returned a non-success HTTP status.

    Attributes:
        status: HTTP status code returned by the task API.
        body: Decoded JSON body, or ``None`` when empty or not JSON.
    """

    def __init__(self, status: int, body: Any = None):
        super().__init__(f"Task API responded with HTTP {status}")
        self.status = status
        self.body = body


class NoResponseReceived(TaskApiError):
    """The request was sent but no response arrived (network failure or timeout)."""


class MalformedRequest(TaskApiError):
    """The request could not be prepared or sent to the task API."""


@dataclass(frozen=True)
class ClassifiedError:
    """
    User-facing description of a failed request.

    Attributes:
        status: HTTP status code for the error response.
        title: Short heading shown on the error page.
        message: Explanatory sentence shown under the heading.
    """

    status: int
    title: str
    message: str


def _describe(error: Any) -> str:
    """Return a one-line description of *error* without walking its contents."""
    if error is None or isinstance(error, str):
        return repr(error)
    if isinstance(error, BaseException):
        try:
            return f"{type(error).__name__}: {error}"
        except Exception:
            return type(error).__name__
    return f"<{type(error).__name__} object>"


def _rejected_message(body: Any) -> str:
    """Pick ``detail``, then ``message``, from a rejection body, else a default."""
    if isinstance(body, dict):
        for field in ("detail", "message"):
            value = body.get(field)
            if isinstance(value, str) and value:
                return value
    return REJECTED_DEFAULT_MESSAGE


def classify_error(error: Any) -> ClassifiedError:
    """
    Map any error value to the status, title and message to display.

    Only the failure variants raised by the task API client carry structured
    information; everything else (``None``, strings, generic exceptions,
    arbitrary objects) is reported as an unexpected error. Only ``status``
    and ``body`` are read from a :class:`RemoteRejected`, so the error is
    never serialised or traversed.

    Args:
        error: The value that caused the request to fail.

    Returns:
        A :class:`ClassifiedError`. This function never raises.
    """
    logger.error(
        "Error: %s",
        _describe(error),
        exc_info=error if isinstance(error, BaseException) else None,
    )

    if isinstance(error, RemoteRejected):
        if error.status == 404:
            return ClassifiedError(404, NOT_FOUND_TITLE, NOT_FOUND_MESSAGE)
        return ClassifiedError(error.status, REJECTED_TITLE, _rejected_message(error.body))

    if isinstance(error, NoResponseReceived):
        return ClassifiedError(503, UNAVAILABLE_TITLE, UNAVAILABLE_MESSAGE)

    return ClassifiedError(500, GENERIC_TITLE, GENERIC_MESSAGE)


def _render_error(classified: ClassifiedError):
    """Render a classified error as JSON or as the HTML error page."""
    if request.endpoint in JSON_ENDPOINTS:
        return (
            jsonify(success=False, title=classified.title, message=classified.message),
            classified.status,
        )
    return (
        render_template("error.html", title=classified.title, message=classified.message),
        classified.status,
    )


def register_error_handlers(app: Flask) -> None:
    """
    Register the application-wide error handlers.

    Args:
        app: The Flask application instance.
    """

    @app.errorhandler(NotFound)
    def handle_page_not_found(_error: NotFound):
        """Render the page-not-found view for unmatched routes."""
        return _render_error(ClassifiedError(404, PAGE_NOT_FOUND_TITLE, PAGE_NOT_FOUND_MESSAGE))

    @app.errorhandler(HTTPException)
    def handle_http_exception(error: HTTPException):
        """Render framework-raised HTTP errors (405, 400, ...) with their own code."""
        return _render_error(
            ClassifiedError(error.code or 500, error.name, error.description or GENERIC_MESSAGE)
        )

    @app.errorhandler(Exception)
    def handle_unexpected_error(error: Exception):
        """Send any other failure through the classifier."""
        return _render_error(classify_error(error))
