"""
SubFindr - Open Source Subdomain Enumeration Tool
Author: ha-2
GitHub: https://github.com/ha-2
License: CC BY-NC 4.0
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional

import aiodns
import aiohttp

from subfindr.config import ScanSettings
from subfindr.schemas import ProbeOutcome

logger = logging.getLogger(__name__)

# Auth-gated hosts still answer, so they count as live
AUTH_STATUSES = (401, 403)


def is_live_status(status: int) -> bool:
    return status < 400 or status in AUTH_STATUSES


class AiodnsResolver:
    """A record lookups through c-ares"""

    def __init__(self, timeout: float = 3.0, nameservers: Optional[List[str]] = None):
        self._resolver = aiodns.DNSResolver(nameservers=nameservers or None, timeout=timeout)

    async def resolve(self, hostname: str) -> Optional[str]:
        result = await self._resolver.query(hostname, 'A')
        if result:
            return result[0].host
        return None

    async def close(self) -> None:
        await self._resolver.close()


class DohResolver:
    """A record lookups through a JSON DNS-over-HTTPS endpoint"""

    def __init__(self, session: aiohttp.ClientSession, url: str = "https://dns.google/resolve"):
        self._session = session
        self._url = url

    async def resolve(self, hostname: str) -> Optional[str]:
        params = {"name": hostname, "type": "A"}
        headers = {"Accept": "application/dns-json"}
        async with self._session.get(self._url, params=params, headers=headers) as response:
            data = await response.json(content_type=None)

        if not isinstance(data, dict):
            return None
        answers = data.get("Answer") or []
        if answers:
            return answers[0].get("data")
        return None

    async def close(self) -> None:
        # the session belongs to open_prober
        pass


class LivenessProber:
    """
    Decide whether a single subdomain is live.

    Two signals are tried in order: an HTTPS HEAD request, then a DNS A
    lookup. The first positive signal wins. Every failure is treated as
    "no signal", so probe() never raises.
    """

    def __init__(self, session: aiohttp.ClientSession, resolver,
                 http_timeout: float = 3.0, dns_timeout: float = 3.0):
        self._session = session
        self._resolver = resolver
        self._http_timeout = http_timeout
        self._dns_timeout = dns_timeout

    async def check_http(self, hostname: str) -> bool:
        """HEAD the host over HTTPS without following redirects"""
        try:
            timeout = aiohttp.ClientTimeout(total=self._http_timeout)
            async with self._session.head(f"https://{hostname}", allow_redirects=False,
                                          timeout=timeout) as response:
                return is_live_status(response.status)
        except asyncio.TimeoutError:
            logger.debug(f"HTTP check timed out for {hostname}")
        except aiohttp.ClientError as e:
            logger.debug(f"HTTP check failed for {hostname}: Client error - {e}")
        except Exception as e:
            logger.debug(f"HTTP check failed for {hostname}: {e}")
        return False

    async def resolve_dns(self, hostname: str) -> Optional[str]:
        """Resolve hostname to IP address"""
        try:
            return await asyncio.wait_for(self._resolver.resolve(hostname), timeout=self._dns_timeout)
        except asyncio.TimeoutError:
            logger.debug(f"DNS resolution timed out for {hostname}")
        except Exception as e:
            logger.debug(f"DNS resolution failed for {hostname}: {e}")
        return None

    async def probe(self, label: str, domain: str) -> ProbeOutcome:
        hostname = f"{label}.{domain}"

        if await self.check_http(hostname):
            return ProbeOutcome(active=True)

        ip = await self.resolve_dns(hostname)
        if ip:
            return ProbeOutcome(active=True, address=ip)

        return ProbeOutcome(active=False)


@asynccontextmanager
async def open_prober(settings: ScanSettings) -> AsyncIterator[LivenessProber]:
    """Create a prober with its own HTTP session and resolver for one scan"""
    timeout = aiohttp.ClientTimeout(total=settings.http_timeout)
    connector = aiohttp.TCPConnector(limit=settings.batch_size)
    async with aiohttp.ClientSession(timeout=timeout, connector=connector) as session:
        if settings.dns_backend == "doh":
            resolver = DohResolver(session, settings.doh_url)
        else:
            resolver = AiodnsResolver(timeout=settings.dns_timeout, nameservers=settings.nameservers)
        try:
            yield LivenessProber(session, resolver,
                                 http_timeout=settings.http_timeout,
                                 dns_timeout=settings.dns_timeout)
        finally:
            await resolver.close()
