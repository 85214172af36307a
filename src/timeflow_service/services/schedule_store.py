"""Pass-through client for the REST schedule store."""

import logging
from collections.abc import Callable
from functools import lru_cache
from typing import TypeVar

import httpx

from ..config import settings
from ..models.schedule import ScheduleDraft, ScheduleItem

logger = logging.getLogger(__name__)

# Default timeout for HTTP requests (seconds)
DEFAULT_TIMEOUT = 10.0

T = TypeVar("T")


class ScheduleStoreError(Exception):
    """Raised when the schedule store is unreachable or rejects a request."""


def _to_store_payload(draft: ScheduleDraft) -> dict[str, str]:
    """Map a draft onto the field names the store expects."""
    return {
        "title": draft.title,
        "date": draft.date,
        "startTime": draft.start_time,
        "endTime": draft.end_time,
        "color": draft.color_tag,
        "description": draft.note,
    }


def _validate_item_list(data: object) -> list[ScheduleItem]:
    if not isinstance(data, list):
        raise ValueError("Expected a list of schedule items")
    return [ScheduleItem.model_validate(entry) for entry in data]


def _parse_response(response: httpx.Response, validate: Callable[[object], T]) -> T:
    """Decode a store reply, treating malformed bodies as store failures."""
    try:
        return validate(response.json())
    except ValueError as e:
        logger.error(f"Invalid schedule store response from {response.request.url}: {e}")
        raise ScheduleStoreError("Schedule store returned an invalid response") from e


class ScheduleStoreClient:
    """Client for the schedule collection of the REST store."""

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize schedule store client.

        Args:
            base_url: API root of the store (e.g., "http://localhost:5000/api")
            timeout: Request timeout in seconds
            transport: Optional httpx transport, used by tests
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @property
    def health_url(self) -> str:
        """Health endpoint lives beside the API root, not under it."""
        root = self.base_url.removesuffix("/api")
        return f"{root}/health"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            async with self._client() as client:
                response = await client.request(method, url, **kwargs)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"Schedule store returned {e.response.status_code} for {method} {url}")
            raise ScheduleStoreError(
                f"Schedule store returned {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Schedule store request failed ({method} {url}): {e}")
            raise ScheduleStoreError(f"Schedule store unreachable: {e}") from e
        return response

    async def is_available(self) -> bool:
        """Check whether the store answers its health endpoint."""
        try:
            await self._request("GET", self.health_url)
        except ScheduleStoreError:
            return False
        return True

    async def create_item(self, draft: ScheduleDraft) -> ScheduleItem:
        """Store a draft and return the entry with its assigned identity."""
        response = await self._request(
            "POST", f"{self.base_url}/schedule", json=_to_store_payload(draft)
        )
        item = _parse_response(response, ScheduleItem.model_validate)
        logger.info(f"Schedule item created: {item.id} ({item.title})")
        return item

    async def list_items(self) -> list[ScheduleItem]:
        """Return all stored entries, ordered by the store."""
        response = await self._request("GET", f"{self.base_url}/schedule")
        return _parse_response(response, _validate_item_list)

    async def delete_item(self, item_id: str) -> None:
        """Delete a stored entry (undo of a capture)."""
        await self._request("DELETE", f"{self.base_url}/schedule/{item_id}")
        logger.info(f"Schedule item deleted: {item_id}")


@lru_cache(maxsize=1)
def get_schedule_store() -> ScheduleStoreClient:
    """Get or create ScheduleStoreClient singleton."""
    return ScheduleStoreClient(
        base_url=settings.schedule_store_url,
        timeout=settings.schedule_store_timeout,
    )
