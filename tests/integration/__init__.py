"""
Integration tests for the frontend routes.

Tests use the Flask test client with the task API transport stubbed and
cover page rendering, form submission, redirects and error pages.
"""
