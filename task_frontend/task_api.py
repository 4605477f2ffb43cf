"""
HTTP client for the remote task API.

Centralises every outbound call the frontend makes. Each public method maps
to exactly one remote endpoint, sends one request with the configured
timeout, and returns the decoded JSON body unchanged.

Failures are translated at this boundary into the variants defined in
:mod:`task_frontend.errors` and raised; nothing is retried and no
user-facing text is produced here.
"""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Any

import requests
from flask import current_app

from .errors import MalformedRequest, NoResponseReceived, RemoteRejected
from .models import TaskRequest

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 1.0


def _path_id(task_id: Any) -> str:
    """Render a task identifier for a URL path; the NaN sentinel is sent as ``NaN``."""
    if isinstance(task_id, float) and math.isnan(task_id):
        return "NaN"
    return str(task_id)


def _query_value(value: Any) -> str:
    """Render a query value, sending ``""`` when nothing was supplied."""
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _decode_body(response: requests.Response) -> Any:
    """Return the JSON body of *response*, or ``None`` if it is empty or not JSON."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None


class TaskApiClient:
    """
    Thin wrapper around the task API endpoints.

    Args:
        base_url: Base address of the task API (e.g.
            ``"http://backend:8080/api"``).
        timeout: Seconds to wait for each call before giving up.
        session: Optional pre-built :class:`requests.Session`.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _request(self, method: str, path: str, **kwargs) -> Any:
        """
        Send one request to the task API and decode the result.

        Args:
            method: HTTP method.
            path: Path relative to the base URL.
            **kwargs: Forwarded to :meth:`requests.Session.request`
                (e.g. ``json``).

        Returns:
            The decoded JSON body, or ``None`` for an empty body.

        Raises:
            RemoteRejected: The API answered with a 4xx/5xx status.
            NoResponseReceived: The connection failed or timed out.
            MalformedRequest: The request could not be sent at all.
        """
        url = self._url(path)
        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except (requests.Timeout, requests.ConnectionError) as exc:
            raise NoResponseReceived(f"{method} {url} failed: {exc}") from exc
        except requests.RequestException as exc:
            raise MalformedRequest(f"{method} {url} could not be sent: {exc}") from exc

        if response.status_code >= 400:
            raise RemoteRejected(response.status_code, _decode_body(response))
        return _decode_body(response)

    def get_all_tasks(self) -> list[dict[str, Any]]:
        """Fetch every task."""
        return self._request("GET", "/tasks/get-all-tasks")

    def get_task(self, task_id) -> dict[str, Any]:
        """Fetch a single task by identifier."""
        return self._request("GET", f"/tasks/{_path_id(task_id)}/get-task")

    def create_task(self, task: TaskRequest) -> dict[str, Any]:
        """Create a task and return the stored representation."""
        return self._request("POST", "/tasks/create-task", json=task.to_payload())

    def update_task(self, task_id, task: TaskRequest) -> dict[str, Any]:
        """Replace all editable fields of a task."""
        return self._request("PUT", f"/tasks/{_path_id(task_id)}/update-task", json=task.to_payload())

    def update_task_status(self, task_id, status) -> dict[str, Any]:
        """Change only the status of a task."""
        return self._request("PUT", f"/tasks/{_path_id(task_id)}/status?status={_query_value(status)}")

    def delete_task(self, task_id) -> None:
        """Delete a task."""
        self._request("DELETE", f"/tasks/{_path_id(task_id)}/delete-task")


def get_task_api() -> TaskApiClient:
    """Return the client bound to the current application."""
    return current_app.extensions["task_api"]
