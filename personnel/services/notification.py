"""Propagation sinks for change notifications."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Protocol

import httpx

logger = logging.getLogger(__name__)


class Event(Protocol):
    name: str

    def to_payload(self) -> dict[str, Any]: ...


class EventPublisher(Protocol):
    async def publish(self, event: Event) -> None: ...


class RecordingEventPublisher:
    """Keeps published events in memory, in publication order."""

    def __init__(self) -> None:
        self.events: list[Event] = []

    async def publish(self, event: Event) -> None:
        self.events.append(event)


class WebhookEventPublisher:
    """Post each event as JSON to the configured webhook.

    Delivery errors are raised to the caller so the update pipeline can report
    them.
    """

    def __init__(
        self,
        webhook_url: str | None,
        *,
        timeout: float = 10.0,
        client_factory: Callable[[], httpx.AsyncClient] = httpx.AsyncClient,
    ) -> None:
        self._webhook_url = webhook_url
        self._timeout = timeout
        self._client_factory = client_factory

    async def publish(self, event: Event) -> None:
        if not self._webhook_url:
            logger.warning("Notification webhook URL is not set. Event %s skipped.", event.name)
            return

        async with self._client_factory() as client:
            response = await client.post(
                self._webhook_url, json=event.to_payload(), timeout=self._timeout
            )
            response.raise_for_status()
        logger.info("Notification %s sent successfully.", event.name)
