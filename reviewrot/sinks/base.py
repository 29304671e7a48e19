"""Common behaviour for lead sinks and the post-response task list."""

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Optional

import httpx

from ..errors import SinkError
from ..models import LeadRecord

logger = logging.getLogger(__name__)


class LeadSink(ABC):
    """
    Somewhere a scored lead gets delivered after the response is sent.

    deliver() never raises: failures are logged and reported as False,
    so one sink failing cannot affect another or the caller.
    """

    name = "sink"

    def __init__(
        self,
        timeout: float = 30,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout = timeout
        self._transport = transport

    @property
    @abstractmethod
    def configured(self) -> bool:
        """Whether the sink has the credentials/URL it needs."""

    def accepts(self, lead: LeadRecord) -> bool:
        """Whether this lead should be delivered to this sink."""
        return self.configured

    async def deliver(self, lead: LeadRecord) -> bool:
        """
        Deliver a lead, logging and swallowing delivery failures.

        Returns:
            True if delivered, False if skipped or failed
        """
        if not self.accepts(lead):
            logger.debug("%s: skipping lead for %s", self.name, lead.business_name)
            return False

        try:
            async with self._client() as client:
                await self.send(client, lead)
        except (SinkError, httpx.HTTPError) as e:
            logger.warning("%s delivery failed: %s", self.name, e)
            return False

        logger.info("%s: lead sent for %s", self.name, lead.business_name)
        return True

    @abstractmethod
    async def send(self, client: httpx.AsyncClient, lead: LeadRecord) -> None:
        """Sink-specific delivery. May raise SinkError or httpx errors."""

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    def _check(self, response: httpx.Response) -> None:
        if response.status_code >= 400:
            raise SinkError(self.name, f"HTTP {response.status_code}: {response.text[:200]}")


@dataclass
class PostResponseTask:
    """One sink delivery, scheduled after the primary response."""

    sink: LeadSink
    lead: LeadRecord

    @property
    def name(self) -> str:
        return self.sink.name

    async def run(self) -> bool:
        return await self.sink.deliver(self.lead)


def build_post_response_tasks(
    sinks: Iterable[LeadSink],
    lead: LeadRecord,
) -> list[PostResponseTask]:
    """Tasks for every sink that wants this lead."""
    return [PostResponseTask(sink, lead) for sink in sinks if sink.accepts(lead)]


async def run_post_response_tasks(tasks: list[PostResponseTask]) -> list[bool]:
    """
    Run independent sink deliveries concurrently.

    Completion order is not observed; each task handles its own failure.

    Returns:
        Delivery result per task, in task order
    """
    if not tasks:
        return []

    logger.debug("Running %d post-response task(s): %s", len(tasks), ", ".join(t.name for t in tasks))
    return list(await asyncio.gather(*(task.run() for task in tasks)))
