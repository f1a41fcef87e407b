"""
SubFindr - Open Source Subdomain Enumeration Tool
Author: ha-2
GitHub: https://github.com/ha-2
License: CC BY-NC 4.0
"""

import asyncio
import logging
from typing import Callable, List, Sequence

from subfindr.schemas import (
    Candidate,
    CompleteEvent,
    ProbeOutcome,
    ProgressEvent,
    ResultEvent,
    ResultMethod,
    ScanEvent,
    ScanMethod,
    ScanProgress,
    ScanResult,
)
from subfindr.services.wordlist import is_dictionary_word

logger = logging.getLogger(__name__)

Emit = Callable[[ScanEvent], None]


def resolve_result_method(method: ScanMethod, label: str) -> ResultMethod:
    """Label a result by the generator that proposed it"""
    if method == ScanMethod.ALL:
        return ResultMethod.DICTIONARY if is_dictionary_word(label) else ResultMethod.BRUTEFORCE
    if method == ScanMethod.DICTIONARY:
        return ResultMethod.DICTIONARY
    return ResultMethod.BRUTEFORCE


class BatchScheduler:
    """
    Drive a prober over every candidate in fixed-size batches.

    Probes inside a batch run concurrently and report back through a queue.
    Only the scheduler drains that queue, so the progress counter and the
    emit callback are touched by a single writer. Batches run one after
    another with a short pause in between.
    """

    def __init__(self, prober, method: ScanMethod, batch_size: int = 10, batch_delay: float = 0.1):
        self.prober = prober
        self.method = ScanMethod(method)
        self.batch_size = batch_size
        self.batch_delay = batch_delay

    async def run(self, candidates: Sequence[Candidate], domain: str, emit: Emit) -> None:
        total = len(candidates)
        current = 0

        logger.info(f"Starting live scan of {total} candidates for {domain} ({self.method.value})")

        for start in range(0, total, self.batch_size):
            batch = candidates[start:start + self.batch_size]
            current = await self._run_batch(batch, domain, emit, current, total)

            if start + self.batch_size < total:
                await asyncio.sleep(self.batch_delay)

        emit(CompleteEvent())

    async def _run_batch(self, batch: Sequence[Candidate], domain: str, emit: Emit,
                         current: int, total: int) -> int:
        outcomes: asyncio.Queue = asyncio.Queue()
        workers: List[asyncio.Task] = [
            asyncio.create_task(self._probe_into(outcomes, candidate, domain))
            for candidate in batch
        ]

        try:
            for _ in workers:
                candidate, outcome = await outcomes.get()
                current += 1
                emit(ProgressEvent(progress=ScanProgress(current=current, total=total)))

                if outcome.active:
                    subdomain = f"{candidate.label}.{domain}"
                    logger.info(f"Found active subdomain: {subdomain}")
                    emit(ResultEvent(result=ScanResult(
                        subdomain=subdomain,
                        ip=outcome.address,
                        method=resolve_result_method(self.method, candidate.label),
                    )))
        finally:
            pending = [worker for worker in workers if not worker.done()]
            for worker in pending:
                worker.cancel()
            if pending:
                await asyncio.gather(*pending, return_exceptions=True)

        return current

    async def _probe_into(self, outcomes: asyncio.Queue, candidate: Candidate, domain: str) -> None:
        try:
            outcome = await self.prober.probe(candidate.label, domain)
        except Exception as e:
            logger.debug(f"Probe failed for {candidate.label}.{domain}: {e}")
            outcome = ProbeOutcome(active=False)
        outcomes.put_nowait((candidate, outcome))
