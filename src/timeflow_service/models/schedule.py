"""Schedule-related Pydantic models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ScheduleDraft(BaseModel):
    """Unsaved schedule entry produced by the command interpreter."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    title: str = Field(..., min_length=1, description="Display title")
    date: str = Field(..., description="Target date in YYYY-MM-DD format")
    start_time: str = Field(..., description="Start time in HH:MM (24-hour) format")
    end_time: str = Field(..., description="End time in HH:MM (24-hour) format")
    color_tag: str = Field(..., description="Color marking machine-generated entries")
    note: str = Field(..., description="Annotation describing where the entry came from")


class ScheduleItem(BaseModel):
    """Schedule entry as stored by the REST schedule store."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(..., alias="_id", description="Identity assigned by the store")
    title: str
    date: str
    start_time: str
    end_time: str
    color: str
    description: str | None = None


class CommandRequest(BaseModel):
    """Free-text scheduling command, typed by the user."""

    text: str = Field(
        ...,
        description="Command like 'Meeting tomorrow at 3pm'",
        max_length=1000,
    )
    now: datetime | None = Field(
        None,
        description="Reference instant for relative dates. Defaults to now in the configured timezone.",
    )


class TranscriptRequest(BaseModel):
    """Transcript delivered by a speech recognizer."""

    transcript: str = Field(..., description="Recognized speech", max_length=1000)
    is_final: bool = Field(True, description="False for interim (partial) results")
    now: datetime | None = Field(None, description="Reference instant for relative dates")


class CommandParseResponse(BaseModel):
    """Result of interpreting a command without storing it."""

    matched: bool
    draft: ScheduleDraft | None = None
    message: str


class ScheduleCaptureResponse(BaseModel):
    """Result of interpreting a command and sending it to the schedule store."""

    success: bool
    message: str
    draft: ScheduleDraft | None = None
    item: ScheduleItem | None = None
