"""
Integration tests for the task service.

These tests drive the JSON API through the Flask test client, backed
by either the SQLAlchemy repository or the in-memory repository.
"""
