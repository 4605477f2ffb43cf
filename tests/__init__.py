"""
Test suite for the task manager frontend.

This package contains:
- unit/: classifier, client, model, filter and config tests
- integration/: route tests through the Flask test client
- contracts/: consumer contract checks against the task API description
"""
