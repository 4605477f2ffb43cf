"""
Shared pytest fixtures for the task manager frontend test suite.

Provides the reusable test infrastructure (Flask app, HTTP client, task API
transport double) needed by the unit, integration and contract suites.
Because the frontend is stateless (no database), every external effect is
an outbound HTTP call, and those are intercepted at the
``requests.Session.request`` seam of the task API client.

Key SDET Concepts Demonstrated:
- Fixture scoping (session vs. function) for performance and isolation
- Environment variable overrides for deterministic test configuration
- Replacing the HTTP transport instead of the code under test
- Faker-generated test data
"""

from __future__ import annotations

import os

import pytest
from faker import Faker

# Set testing environment before importing app
os.environ["FLASK_ENV"] = "testing"
os.environ["TEST_API_BASE_URL"] = "http://task-api.test/api"

from shared.test_helpers import RecordingTransport
from task_frontend import create_app

fake = Faker()


@pytest.fixture(scope="session")
def app():
    """
    Provide the Flask application instance for the entire test session.

    Creates the app once with the 'testing' config and reuses it
    across all tests to avoid repeated startup overhead.
    """
    application = create_app("testing")
    yield application


@pytest.fixture(scope="function")
def client(app):
    """
    Provide a Flask test client scoped to a single test function.

    Opens a new test-client context for every test so that request
    state never leaks between tests.
    """
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture(scope="function")
def task_api(app):
    """Return the task API client shared by the application."""
    return app.extensions["task_api"]


@pytest.fixture(scope="function")
def stub_transport(task_api, monkeypatch):
    """
    Factory fixture: install a transport answering with the given results.

    Usage::

        recorder = stub_transport(FakeResponse(200, [...]))
    """

    def _install(*results):
        recorder = RecordingTransport(*results)
        monkeypatch.setattr(task_api.session, "request", recorder)
        return recorder

    return _install


@pytest.fixture
def task_title() -> str:
    """Generate a realistic task title."""
    return fake.sentence(nb_words=4).rstrip(".")
