"""Test configuration and fixtures for SubFindr."""

import asyncio
import os
from contextlib import asynccontextmanager
from typing import Dict, List, Optional, Tuple

import pytest

from subfindr.config import ScanSettings
from subfindr.schemas import ProbeOutcome


class FakeProber:
    """Prober double: known labels are live, everything else is dead."""

    def __init__(self, live: Optional[Dict[str, ProbeOutcome]] = None,
                 delays: Optional[Dict[str, float]] = None):
        self.live = live or {}
        self.delays = delays or {}
        self.calls: List[Tuple[str, str]] = []

    async def probe(self, label: str, domain: str) -> ProbeOutcome:
        self.calls.append((label, domain))
        await asyncio.sleep(self.delays.get(label, 0))
        return self.live.get(label, ProbeOutcome(active=False))


def make_prober_factory(prober):
    """Wrap a prober double in the open_prober context manager shape."""

    @asynccontextmanager
    async def factory(settings):
        yield prober

    return factory


class FakeResponse:
    def __init__(self, status: int = 200, payload=None):
        self.status = status
        self.payload = payload

    async def json(self, content_type=None):
        return self.payload


class FakeRequestContext:
    def __init__(self, response: Optional[FakeResponse] = None, error: Optional[BaseException] = None):
        self.response = response
        self.error = error

    async def __aenter__(self):
        if self.error is not None:
            raise self.error
        return self.response

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    """Minimal aiohttp.ClientSession stand-in recording requests."""

    def __init__(self, response: Optional[FakeResponse] = None, error: Optional[BaseException] = None):
        self.response = response
        self.error = error
        self.requests: List[Tuple[str, str, dict]] = []

    def head(self, url, **kwargs):
        self.requests.append(("HEAD", url, kwargs))
        return FakeRequestContext(self.response, self.error)

    def get(self, url, **kwargs):
        self.requests.append(("GET", url, kwargs))
        return FakeRequestContext(self.response, self.error)


class FakeResolver:
    def __init__(self, address: Optional[str] = None, error: Optional[BaseException] = None,
                 delay: float = 0):
        self.address = address
        self.error = error
        self.delay = delay
        self.lookups: List[str] = []

    async def resolve(self, hostname: str) -> Optional[str]:
        self.lookups.append(hostname)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.address


@pytest.fixture
def fast_settings() -> ScanSettings:
    """Settings without pacing so scans finish instantly."""
    return ScanSettings(batch_delay=0)


@pytest.fixture(autouse=True)
def clean_scan_env(monkeypatch) -> None:
    """Keep host SUBFINDR_* variables out of tests."""
    for key in list(os.environ):
        if key.startswith("SUBFINDR_"):
            monkeypatch.delenv(key, raising=False)
