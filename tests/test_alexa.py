"""Tests for Alexa webhook endpoint."""

from unittest.mock import AsyncMock, patch

from fastapi.testclient import TestClient

from src.timeflow_service.models.schedule import ScheduleItem
from src.timeflow_service.services.schedule_store import ScheduleStoreClient, ScheduleStoreError


def _command_request(value: str) -> dict:
    return {
        "version": "1.0",
        "request": {
            "type": "IntentRequest",
            "intent": {
                "name": "ScheduleCommandIntent",
                "slots": {"command": {"name": "command", "value": value}},
            },
        },
    }


def test_alexa_launch_request(client: TestClient) -> None:
    """Test Alexa launch request returns welcome message."""
    response = client.post(
        "/alexa",
        json={
            "version": "1.0",
            "request": {"type": "LaunchRequest", "locale": "en-US"},
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["version"] == "1.0"
    assert "Welcome" in data["response"]["outputSpeech"]["text"]
    assert data["response"]["shouldEndSession"] is False
    assert "card" not in data["response"]


def test_alexa_help_intent(client: TestClient) -> None:
    """Test Alexa help intent returns usage instructions."""
    response = client.post(
        "/alexa",
        json={
            "version": "1.0",
            "request": {
                "type": "IntentRequest",
                "intent": {"name": "AMAZON.HelpIntent"},
            },
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert "say" in data["response"]["outputSpeech"]["text"].lower()


def test_alexa_stop_intent(client: TestClient) -> None:
    """Test Alexa stop intent ends session."""
    response = client.post(
        "/alexa",
        json={
            "version": "1.0",
            "request": {
                "type": "IntentRequest",
                "intent": {"name": "AMAZON.StopIntent"},
            },
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["response"]["shouldEndSession"] is True


def test_alexa_schedule_command_intent_success(client: TestClient) -> None:
    """Test Alexa schedule command intent stores the interpreted draft."""
    stored = ScheduleItem(
        id="65a1f0c2e4b0a1b2c3d4e5f6",
        title="Meeting",
        date="2024-01-02",
        start_time="15:00",
        end_time="16:00",
        color="bg-indigo-500",
    )

    with patch.object(
        ScheduleStoreClient,
        "create_item",
        new_callable=AsyncMock,
        return_value=stored,
    ) as create_item:
        response = client.post("/alexa", json=_command_request("meeting tomorrow at 3 pm"))

    assert response.status_code == 200
    data = response.json()
    speech = data["response"]["outputSpeech"]["text"]
    assert "Scheduled: meeting at 15:00" in speech
    assert data["response"]["card"]["title"] == "Task Scheduled"
    assert data["response"]["shouldEndSession"] is True
    create_item.assert_awaited_once()


def test_alexa_schedule_command_intent_no_text(client: TestClient) -> None:
    """Test Alexa schedule command intent with no command text."""
    with patch.object(ScheduleStoreClient, "create_item", new_callable=AsyncMock) as create_item:
        response = client.post("/alexa", json=_command_request(""))

    assert response.status_code == 200
    data = response.json()
    assert "didn't catch" in data["response"]["outputSpeech"]["text"].lower()
    assert data["response"]["shouldEndSession"] is False
    create_item.assert_not_called()


def test_alexa_schedule_command_intent_store_failure(client: TestClient) -> None:
    """Test Alexa apologizes when the store is unreachable."""
    with patch.object(
        ScheduleStoreClient,
        "create_item",
        new_callable=AsyncMock,
        side_effect=ScheduleStoreError("Schedule store unreachable: timed out"),
    ):
        response = client.post("/alexa", json=_command_request("dentist on friday"))

    data = response.json()
    assert "couldn't save" in data["response"]["outputSpeech"]["text"]
    assert "unreachable" not in data["response"]["outputSpeech"]["text"]
