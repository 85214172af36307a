"""Alexa Skill webhook endpoint."""

import logging

from fastapi import APIRouter

from ..models.alexa import AlexaRequestEnvelope, AlexaResponse
from ..services.alexa_handler import handle_alexa_request

logger = logging.getLogger(__name__)

router = APIRouter(tags=["alexa"])


@router.post("/alexa", response_model=AlexaResponse, response_model_exclude_none=True)
async def alexa_webhook(envelope: AlexaRequestEnvelope) -> AlexaResponse:
    """
    Handle Alexa Skill requests.

    This endpoint receives requests from the Alexa service when users
    interact with the TimeFlow skill.

    Supported intents:
    - LaunchRequest: "Alexa, open TimeFlow"
    - ScheduleCommandIntent: "Alexa, tell TimeFlow to schedule meeting tomorrow at 3pm"
    - AMAZON.HelpIntent: "Alexa, ask TimeFlow for help"
    - AMAZON.StopIntent: "Alexa, stop"

    The response is returned in Alexa response format with speech output.
    """
    logger.info(f"Alexa request received: {envelope.request.type}")

    return await handle_alexa_request(envelope)
