"""Jinja template filters for task pages."""

from __future__ import annotations

from datetime import datetime

from flask import Flask

INVALID_DATE = "Invalid Date"

STATUS_BADGES = {
    "TODO": "govuk-tag--grey",
    "IN_PROGRESS": "govuk-tag--blue",
    "COMPLETED": "govuk-tag--green",
    "CANCELLED": "govuk-tag--red",
}


def format_date(value: str | datetime | None) -> str:
    """
    Format a timestamp as ``"25 Dec 2024, 14:30"``.

    Accepts an ISO-8601 string (a trailing ``Z`` is treated as UTC) or a
    :class:`datetime`. The time is shown in the timestamp's own offset.

    Returns:
        The formatted string, ``""`` for an empty value, or
        ``"Invalid Date"`` when the value cannot be parsed.
    """
    if not value:
        return ""
    if isinstance(value, datetime):
        parsed = value
    else:
        try:
            parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
        except ValueError:
            return INVALID_DATE
    return parsed.strftime("%d %b %Y, %H:%M")


def status_badge(status: str | None) -> str:
    """Return the GOV.UK tag modifier class for a status, or ``""`` if unknown."""
    if isinstance(status, str):
        return STATUS_BADGES.get(status, "")
    return ""


def register_filters(app: Flask) -> None:
    app.add_template_filter(format_date, "format_date")
    app.add_template_filter(status_badge, "status_badge")
