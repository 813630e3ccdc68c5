"""Unit tests for the task service components."""
