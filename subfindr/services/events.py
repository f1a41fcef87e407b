"""
SubFindr - Open Source Subdomain Enumeration Tool
Author: ha-2
GitHub: https://github.com/ha-2
License: CC BY-NC 4.0
"""

import asyncio
import contextlib
import logging
from functools import partial
from typing import AsyncIterable, AsyncIterator, Optional

from subfindr.config import ScanSettings
from subfindr.schemas import CompleteEvent, ScanEvent, ScanPlan, ScanRequest, normalize_domain
from subfindr.services.candidates import generate_candidates
from subfindr.services.prober import open_prober
from subfindr.services.report import ScanReport
from subfindr.services.scheduler import BatchScheduler

logger = logging.getLogger(__name__)


class InvalidScanRequest(ValueError):
    """Raised for requests that must be rejected before scanning starts"""


def prepare_scan(request: ScanRequest, settings: Optional[ScanSettings] = None) -> ScanPlan:
    settings = settings or ScanSettings()

    domain = normalize_domain(request.domain)
    if not domain:
        raise InvalidScanRequest("Domain is required")

    candidates = generate_candidates(request.method,
                                     limit=settings.bruteforce_limit,
                                     max_length=settings.bruteforce_max_length)
    return ScanPlan(domain=domain, method=request.method, candidates=candidates)


def _forward_failure(events: asyncio.Queue, task: asyncio.Task) -> None:
    if not task.cancelled() and task.exception() is not None:
        events.put_nowait(task.exception())


async def stream_scan(plan: ScanPlan, settings: Optional[ScanSettings] = None,
                      prober_factory=open_prober,
                      report: Optional[ScanReport] = None) -> AsyncIterator[ScanEvent]:
    """
    Run a scan and yield its events as they are emitted.

    The stream ends right after the CompleteEvent. Closing the iterator
    before that cancels the scan, including probes still in flight.
    Every yielded event is also applied to `report`, so a caller that
    passes one can export the findings once the stream is done.
    """
    settings = settings or ScanSettings()
    report = report if report is not None else ScanReport()
    events: asyncio.Queue = asyncio.Queue()

    async with prober_factory(settings) as prober:
        scheduler = BatchScheduler(prober, plan.method,
                                   batch_size=settings.batch_size,
                                   batch_delay=settings.batch_delay)
        task = asyncio.create_task(scheduler.run(plan.candidates, plan.domain, events.put_nowait))
        task.add_done_callback(partial(_forward_failure, events))

        try:
            while True:
                event = await events.get()
                if isinstance(event, BaseException):
                    logger.error(f"Scan failed for domain {plan.domain}: {event}")
                    raise event
                report.apply(event)
                yield event
                if isinstance(event, CompleteEvent):
                    break
            await task
            logger.info(f"Live scan of {plan.domain} finished: {len(report.results)} active "
                        f"out of {report.progress.total}")
        finally:
            if not task.done():
                logger.info(f"Scan for {plan.domain} stopped after {report.progress.current} "
                            f"of {len(plan.candidates)} candidates")
                task.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await task


def format_sse(event: ScanEvent) -> str:
    """Frame one event as a Server-Sent Events data line"""
    return f"data: {event.model_dump_json(exclude_none=True)}\n\n"


async def sse_frames(events: AsyncIterable[ScanEvent]) -> AsyncIterator[str]:
    async for event in events:
        yield format_sse(event)
