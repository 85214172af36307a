"""Scheduling command endpoints."""

import logging
from datetime import datetime
from zoneinfo import ZoneInfo

from fastapi import APIRouter, HTTPException

from ..config import settings
from ..models.schedule import (
    CommandParseResponse,
    CommandRequest,
    ScheduleCaptureResponse,
    ScheduleItem,
    TranscriptRequest,
)
from ..services.command_interpreter import NO_MATCH_MESSAGE, format_confirmation, interpret
from ..services.schedule_store import ScheduleStoreError, get_schedule_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["schedule"])


def _local_now(now: datetime | None) -> datetime:
    """Reference instant as naive wall-clock time in the user's calendar."""
    if now is None:
        return datetime.now(ZoneInfo(settings.timezone)).replace(tzinfo=None)
    if now.tzinfo is not None:
        return now.astimezone(ZoneInfo(settings.timezone)).replace(tzinfo=None)
    return now


def _parse(text: str, now: datetime | None) -> CommandParseResponse:
    draft = interpret(text, _local_now(now))
    if draft is None:
        return CommandParseResponse(matched=False, message=NO_MATCH_MESSAGE)
    return CommandParseResponse(matched=True, draft=draft, message=format_confirmation(draft))


async def _capture(text: str, now: datetime | None) -> ScheduleCaptureResponse:
    draft = interpret(text, _local_now(now))
    if draft is None:
        return ScheduleCaptureResponse(success=False, message=NO_MATCH_MESSAGE)

    try:
        item = await get_schedule_store().create_item(draft)
    except ScheduleStoreError as e:
        return ScheduleCaptureResponse(
            success=False,
            message=f"Failed to schedule task: {e}",
            draft=draft,
        )

    return ScheduleCaptureResponse(
        success=True,
        message=format_confirmation(draft),
        draft=draft,
        item=item,
    )


@router.post("/parse", response_model=CommandParseResponse)
async def parse_command(request: CommandRequest) -> CommandParseResponse:
    """
    Interpret a scheduling command without storing it.

    Extracts:
    - Title (command text minus date and time words)
    - Date ("tomorrow", "next week", weekday names; default today)
    - Start/end time (first clock time, one hour slot; default 09:00-10:00)

    Example input: "Meeting tomorrow at 3pm"
    """
    return _parse(request.text, request.now)


@router.post("/capture", response_model=ScheduleCaptureResponse)
async def capture_command(request: CommandRequest) -> ScheduleCaptureResponse:
    """
    Interpret a command and send the draft to the schedule store.

    Blank commands and store failures are reported with success=false.
    """
    return await _capture(request.text, request.now)


@router.post("/transcript", response_model=ScheduleCaptureResponse)
async def capture_transcript(request: TranscriptRequest) -> ScheduleCaptureResponse:
    """
    Schedule from a speech recognizer transcript.

    Only finalized transcripts are interpreted. Interim results are
    acknowledged and dropped so a live microphone stream does not create
    overlapping drafts.
    """
    if not request.is_final:
        logger.debug("Ignoring interim transcript")
        return ScheduleCaptureResponse(success=False, message="Waiting for final transcript")

    logger.info(f"Voice transcript received: {request.transcript}")
    return await _capture(request.transcript, request.now)


@router.get("", response_model=list[ScheduleItem])
async def list_schedule() -> list[ScheduleItem]:
    """List schedule entries from the store."""
    try:
        return await get_schedule_store().list_items()
    except ScheduleStoreError as e:
        raise HTTPException(status_code=502, detail=str(e))


@router.delete("/{item_id}", status_code=204)
async def delete_schedule_item(item_id: str) -> None:
    """Delete a schedule entry, e.g. to undo a capture."""
    try:
        await get_schedule_store().delete_item(item_id)
    except ScheduleStoreError as e:
        raise HTTPException(status_code=502, detail=str(e))
