"""
HTML view routes for the task manager frontend.

Implements the user-facing routes of the task UI. Each handler reads its
parameters from the request, makes exactly one call through the task API
client, and either renders a Jinja template or redirects back to the task
list.

Handlers contain no ``try``/``except``: any failure raised by
the client propagates to the application error handlers in
:mod:`task_frontend.errors`, which classify it and render the error page.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Any, Mapping

from flask import Blueprint, jsonify, redirect, render_template, request, url_for

from ..models import TaskRequest, TaskStatus
from ..task_api import get_task_api

logger = logging.getLogger(__name__)

views_bp = Blueprint("views", __name__)

_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


# =====================================================================
# Helper Functions
# =====================================================================


def parse_task_id(raw_id: str) -> int | float:
    """
    Parse a task identifier taken from the URL.

    The identifier is not validated here. Leading whitespace is skipped
    and the leading run of digits is used, so ``"12abc"`` gives 12 and
    ``"1.5"`` gives 1. A value with no leading digits becomes ``nan`` and
    is forwarded to the task API, which decides how to reject it.

    Args:
        raw_id: The ``id`` path segment as received.

    Returns:
        The integer identifier, or ``float("nan")``.
    """
    match = _LEADING_INTEGER.match(raw_id)
    if match:
        return int(match.group(1))
    return math.nan


def _submitted_data() -> Mapping[str, Any]:
    """Return the JSON body if one was sent, otherwise the form fields."""
    payload = request.get_json(silent=True)
    if isinstance(payload, dict):
        return payload
    return request.form


# =====================================================================
# Service Routes
# =====================================================================


@views_bp.route("/")
def home():
    """Redirect the site root to the task list."""
    return redirect(url_for("views.index"))


@views_bp.route("/health", methods=["GET"])
def health_check():
    """
    Return service health status.

    Intended for load-balancer and orchestrator liveness probes; it does
    not contact the task API.
    """
    return jsonify(status="UP")


# =====================================================================
# Task Routes
# =====================================================================


@views_bp.route("/tasks", methods=["GET"], strict_slashes=False)
def index():
    """Render the list of all tasks."""
    tasks = get_task_api().get_all_tasks()
    return render_template("tasks/index.html", title="Tasks", tasks=tasks)


@views_bp.route("/tasks/create", methods=["GET"])
def new_task():
    """Render the empty task creation form."""
    return render_template(
        "tasks/create.html",
        title="Create task",
        statuses=TaskStatus.values(),
    )


@views_bp.route("/tasks/create", methods=["POST"])
def create_task():
    """
    Handle task creation form submission.

    Empty description and due date fields are coerced before the payload is
    sent; all other validation happens in the task API.

    Returns:
        A redirect to the task list.
    """
    data = _submitted_data()
    logger.info(
        "Creating task with data: title=%r description=%r status=%r dueDateTime=%r",
        data.get("title"),
        data.get("description"),
        data.get("status"),
        data.get("dueDateTime"),
    )
    get_task_api().create_task(TaskRequest.from_form(data))
    return redirect(url_for("views.index"))


@views_bp.route("/tasks/<task_id>/edit", methods=["GET"])
def edit_task(task_id: str):
    """Render the edit form pre-populated with the stored task."""
    task = get_task_api().get_task(parse_task_id(task_id))
    return render_template(
        "tasks/edit.html",
        title="Edit Task",
        task=task,
        statuses=TaskStatus.values(),
    )


@views_bp.route("/tasks/<task_id>/edit", methods=["POST"])
def update_task(task_id: str):
    """Handle the edit form submission and return to the task list."""
    get_task_api().update_task(parse_task_id(task_id), TaskRequest.from_form(_submitted_data()))
    return redirect(url_for("views.index"))


@views_bp.route("/tasks/<task_id>/status", methods=["POST"])
def update_status(task_id: str):
    """
    Handle a quick status change from the task list.

    Called from script on the list page, so it answers with JSON rather
    than a redirect.

    Returns:
        ``{"success": true}`` once the task API accepts the change.
    """
    status = _submitted_data().get("status")
    get_task_api().update_task_status(parse_task_id(task_id), status)
    return jsonify(success=True)


@views_bp.route("/tasks/<task_id>/delete", methods=["POST"])
def delete_task(task_id: str):
    """Delete a task and return to the task list."""
    get_task_api().delete_task(parse_task_id(task_id))
    return redirect(url_for("views.index"))
