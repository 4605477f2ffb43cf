"""
Frontend data models.

Defines the status enum that mirrors the remote task API's contract and the
outbound request payload used for create and update calls. Tasks themselves
are owned by the remote service; the frontend receives them as JSON
dictionaries and passes them straight to the templates.

``TaskStatus`` inherits from ``str`` as well as ``Enum`` so that its values
serialise naturally to JSON strings and compare directly against the plain
strings returned by the task API.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping


class TaskStatus(str, Enum):
    """
    Task lifecycle statuses (mirrors the remote task API contract).

    Attributes:
        TODO: Task has been created but work has not started.
        IN_PROGRESS: Task is actively being worked on.
        COMPLETED: Task has been finished.
        CANCELLED: Task was abandoned.
    """

    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"

    @classmethod
    def values(cls) -> list[str]:
        """Return the raw status strings in declaration order."""
        return [status.value for status in cls]


@dataclass
class TaskRequest:
    """
    Outbound payload for the create and update endpoints.

    A subset of a task: no identifier and no timestamps. Field values are
    forwarded as submitted; validation is the remote service's job.

    Attributes:
        title: Task title.
        description: Free-text description, ``""`` when not supplied.
        status: Status string, normally one of :class:`TaskStatus`.
        due_date_time: ISO-8601 due timestamp, or ``None`` when not set.
    """

    title: Any
    description: str = ""
    status: Any = None
    due_date_time: str | None = None

    @classmethod
    def from_form(cls, data: Mapping[str, Any]) -> "TaskRequest":
        """
        Build a request from submitted form (or JSON) fields.

        Empty strings are coerced: a missing description becomes ``""`` and
        a missing due date becomes ``None``.

        Args:
            data: Mapping with ``title``, ``description``, ``status`` and
                ``dueDateTime`` keys, any of which may be absent.

        Returns:
            A populated :class:`TaskRequest`.
        """
        return cls(
            title=data.get("title"),
            description=data.get("description") or "",
            status=data.get("status"),
            due_date_time=data.get("dueDateTime") or None,
        )

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON body for the remote API, omitting an unset due date."""
        payload: dict[str, Any] = {
            "title": self.title,
            "description": self.description,
            "status": self.status,
        }
        if self.due_date_time is not None:
            payload["dueDateTime"] = self.due_date_time
        return payload
