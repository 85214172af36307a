"""API route modules."""

from . import alexa, health, schedule

__all__ = ["health", "schedule", "alexa"]
