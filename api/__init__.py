"""
HTTP front end for the notification demo.

This package provides a small FastAPI application that exposes:
- A health check
- A single-notification endpoint with a selectable channel
- An endpoint that runs the demo scenarios and returns their output
"""

from api.main import app

__all__ = ["app"]
