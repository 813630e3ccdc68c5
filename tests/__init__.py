"""
Test suite for the task service.

This package contains:
- unit/: controller, validation, repository and model tests
- integration/: HTTP tests through the Flask test client
"""
