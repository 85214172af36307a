"""Alexa Skill request handling."""

import logging
from datetime import datetime
from zoneinfo import ZoneInfo

from ..config import settings
from ..models.alexa import (
    AlexaCard,
    AlexaIntent,
    AlexaOutputSpeech,
    AlexaRequestEnvelope,
    AlexaResponse,
    AlexaResponseBody,
)
from .command_interpreter import format_confirmation, interpret
from .schedule_store import ScheduleStoreError, get_schedule_store

logger = logging.getLogger(__name__)

COMMAND_SLOT = "command"


def _build_response(
    speech: str,
    should_end: bool = True,
    card_title: str | None = None,
    card_content: str | None = None,
) -> AlexaResponse:
    """Build Alexa response object."""
    card = None
    if card_title and card_content:
        card = AlexaCard(title=card_title, content=card_content)

    return AlexaResponse(
        response=AlexaResponseBody(
            outputSpeech=AlexaOutputSpeech(text=speech),
            card=card,
            shouldEndSession=should_end,
        )
    )


async def handle_alexa_request(envelope: AlexaRequestEnvelope) -> AlexaResponse:
    """
    Process Alexa skill request and return response.

    Supported intents:
    - LaunchRequest: Welcome message
    - ScheduleCommandIntent: Interpret the spoken command and schedule it
    - AMAZON.HelpIntent: Usage instructions
    - AMAZON.CancelIntent / AMAZON.StopIntent: Exit

    Args:
        envelope: Full Alexa request envelope

    Returns:
        Alexa response envelope
    """
    request_type = envelope.request.type

    logger.info(f"Alexa request type: {request_type}")

    if request_type == "LaunchRequest":
        return _build_response(
            "Welcome to TimeFlow. Tell me what to schedule, like: "
            "meeting tomorrow at 3pm.",
            should_end=False,
        )

    if request_type == "IntentRequest" and envelope.request.intent:
        intent = envelope.request.intent

        logger.info(f"Alexa intent: {intent.name}")

        if intent.name == "ScheduleCommandIntent":
            return await _handle_schedule_command(intent)

        if intent.name == "AMAZON.HelpIntent":
            return _build_response(
                "You can say things like: Schedule meeting tomorrow at 3pm. "
                "Or: Schedule call mom on friday at 9am. I'll add it to your calendar.",
                should_end=False,
            )

        if intent.name in ["AMAZON.CancelIntent", "AMAZON.StopIntent"]:
            return _build_response("Goodbye!")

        if intent.name == "AMAZON.FallbackIntent":
            return _build_response(
                "I didn't understand that. Try saying: Schedule, followed by your task and time.",
                should_end=False,
            )

    if request_type == "SessionEndedRequest":
        return _build_response("")

    return _build_response(
        "I'm not sure how to help with that. Try saying: Schedule, followed by your task and time.",
        should_end=False,
    )


async def _handle_schedule_command(intent: AlexaIntent) -> AlexaResponse:
    """Handle ScheduleCommandIntent - interpret the utterance and store it."""
    command = intent.slot_value(COMMAND_SLOT)

    # Alexa only delivers finalized utterances, so one call per request
    now = datetime.now(ZoneInfo(settings.timezone)).replace(tzinfo=None)
    draft = interpret(command, now)

    if draft is None:
        return _build_response(
            "I didn't catch that. Please say: Schedule, followed by what and when.",
            should_end=False,
        )

    logger.info(f"Scheduling from voice: title='{draft.title}', date={draft.date}, "
                f"start={draft.start_time}")

    try:
        await get_schedule_store().create_item(draft)
    except ScheduleStoreError as e:
        logger.error(f"Failed to store voice draft '{draft.title}': {e}")
        return _build_response(
            "Sorry, I couldn't save that to your calendar right now. Please try again later."
        )

    confirmation = format_confirmation(draft)

    return _build_response(
        f"{confirmation} on {draft.date}.",
        card_title="Task Scheduled",
        card_content=f"{draft.title}: {draft.date} {draft.start_time}-{draft.end_time}",
    )
