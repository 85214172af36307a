"""Pydantic models for request/response schemas."""

from .alexa import AlexaRequestEnvelope, AlexaResponse
from .schedule import (
    CommandParseResponse,
    CommandRequest,
    ScheduleCaptureResponse,
    ScheduleDraft,
    ScheduleItem,
    TranscriptRequest,
)

__all__ = [
    "ScheduleDraft",
    "ScheduleItem",
    "CommandRequest",
    "TranscriptRequest",
    "CommandParseResponse",
    "ScheduleCaptureResponse",
    "AlexaRequestEnvelope",
    "AlexaResponse",
]
