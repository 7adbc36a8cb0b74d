import asyncio
import logging
import httpx
from typing import Optional

from archon_talents.core.config import settings
from archon_talents.fetch.base import BaseFetcher, FetcherClosedError
from archon_talents.fetch.extractor import extract_talent_string
from archon_talents.schemas import Failed, FetchOutcome, Found, NotFound

logger = logging.getLogger(__name__)


class ArchonFetcher(BaseFetcher):
    """
    Fetches talent build pages from Archon.gg and extracts the talent string.

    One instance owns one HTTP client and one request gate. All concurrent
    callers of fetch() share both, so at most MAX_CONCURRENT_REQUESTS requests
    are in flight per instance at any time.
    """

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._client = httpx.AsyncClient(
            timeout=settings.REQUEST_TIMEOUT,
            limits=httpx.Limits(max_keepalive_connections=settings.POOL_MAX_IDLE_PER_HOST),
            headers={"User-Agent": settings.USER_AGENT},
            follow_redirects=settings.FOLLOW_REDIRECTS,
            transport=transport,
        )
        self._gate = asyncio.Semaphore(settings.MAX_CONCURRENT_REQUESTS)
        self._waiting = 0
        self._closed = False

    async def __aenter__(self) -> "ArchonFetcher":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    @property
    def closed(self) -> bool:
        return self._closed

    async def aclose(self) -> None:
        """Shut the gate, wake queued callers and release pooled connections."""
        if self._closed:
            return
        self._closed = True
        # Semaphore is unbounded: hand every queued caller a permit so it sees the shut gate
        for _ in range(self._waiting):
            self._gate.release()
        await self._client.aclose()

    async def fetch(self, url: str) -> FetchOutcome:
        """
        Fetch one build page and classify the result.

        - Found: page fetched and a talent link extracted
        - NotFound: HTTP 500, any other non-2xx status, transport failure,
          request deadline hit before the headers arrived,
          or no usable talent link in the page
        - Failed: the gate is shut, or the body of a 2xx response could not be
          read within the request deadline
        """
        if self._closed:
            return _gate_closed()

        self._waiting += 1
        try:
            await self._gate.acquire()
        finally:
            self._waiting -= 1

        try:
            # Closed while waiting for a permit
            if self._closed:
                return _gate_closed()
            return await self._fetch_with_permit(url)
        finally:
            self._gate.release()

    async def _fetch_with_permit(self, url: str) -> FetchOutcome:
        loop = asyncio.get_running_loop()
        # One deadline covers connect, headers and body together
        deadline = loop.time() + settings.REQUEST_TIMEOUT

        try:
            request = self._client.build_request("GET", url)
            response = await asyncio.wait_for(
                self._client.send(request, stream=True),
                timeout=settings.REQUEST_TIMEOUT,
            )
        except asyncio.TimeoutError:
            logger.warning("Failed to fetch %s: no response within %ss", url, settings.REQUEST_TIMEOUT)
            return NotFound()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            # Many builds simply don't exist remotely
            logger.warning("Failed to fetch %s: %s", url, e)
            return NotFound()

        try:
            # Archon answers 500 when a build has too little data
            if response.status_code == httpx.codes.INTERNAL_SERVER_ERROR:
                logger.debug("No data available for %s", url)
                return NotFound()

            if not response.is_success:
                logger.warning("HTTP %s for %s", response.status_code, url)
                return NotFound()

            try:
                await asyncio.wait_for(response.aread(), timeout=max(deadline - loop.time(), 0))
            except asyncio.TimeoutError as e:
                logger.error("Timed out reading response body from %s", url)
                return Failed(reason="Failed to read response body", cause=e)
            except httpx.HTTPError as e:
                logger.error("Failed to read response body from %s: %s", url, e)
                return Failed(reason="Failed to read response body", cause=e)

            html = response.text
        finally:
            await response.aclose()

        talent_string = extract_talent_string(html)
        if talent_string is None:
            return NotFound()
        return Found(talent_string=talent_string)


def _gate_closed() -> Failed:
    return Failed(
        reason="Failed to acquire request permit",
        cause=FetcherClosedError("fetcher is closed"),
    )
