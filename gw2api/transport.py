import asyncio
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

import httpx

from gw2api.gw2Helpers import SUCCESS_CODES
from gw2api.logger import logger

ACCEPT = "application/json"
DEFAULT_TIMEOUT_S = 30.0


@dataclass
class Reply:
    status_code: Optional[int]
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""
    reason: str = ""
    latency_ms: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.status_code in SUCCESS_CODES


class Transport:
    """Issues GET requests through one shared httpx.AsyncClient."""

    def __init__(self, client: Optional[httpx.AsyncClient] = None,
                 timeout_s: float = DEFAULT_TIMEOUT_S) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(follow_redirects=True, timeout=timeout_s)

    async def issue(self, url: str, params: Optional[dict[str, Any]] = None) -> Reply:
        t0 = time.perf_counter()
        try:
            resp = await self._client.get(url, params=params, headers={"Accept": ACCEPT})
        except httpx.TimeoutException:
            logger.warning("GET %s timed out", url)
            return Reply(None, reason="timeout",
                         latency_ms=int((time.perf_counter() - t0) * 1000))
        except Exception as e:
            # httpx.HTTPError and the rest (InvalidURL, bad params) alike
            logger.warning("GET %s failed: %s: %s", url, type(e).__name__, e)
            return Reply(None, reason=f"error: {type(e).__name__}: {e}",
                         latency_ms=int((time.perf_counter() - t0) * 1000))

        reply = Reply(
            status_code=resp.status_code,
            headers=resp.headers,
            body=resp.content,
            reason="OK" if resp.status_code in SUCCESS_CODES else f"HTTP {resp.status_code}",
            latency_ms=int((time.perf_counter() - t0) * 1000),
        )
        logger.debug("GET %s -> %s (%d ms)", resp.request.url, resp.status_code, reply.latency_ms)
        return reply

    async def issue_batch(self, requests: list[tuple[str, dict[str, Any]]]) -> list[Reply]:
        # gather preserves submission order
        return list(await asyncio.gather(*(self.issue(url, params) for url, params in requests)))

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "Transport":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
