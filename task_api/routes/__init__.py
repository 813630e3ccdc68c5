"""
Routes package for the task service.

This package contains the ``api`` blueprint exposing the task
controller over JSON/HTTP.
"""
