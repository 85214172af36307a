"""Business logic services."""

from .alexa_handler import handle_alexa_request
from .command_interpreter import format_confirmation, interpret
from .schedule_store import ScheduleStoreClient, ScheduleStoreError, get_schedule_store

__all__ = [
    "interpret",
    "format_confirmation",
    "handle_alexa_request",
    "ScheduleStoreClient",
    "ScheduleStoreError",
    "get_schedule_store",
]
