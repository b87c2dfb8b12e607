"""Endpoint engine: capability checks, request fan-out and pagination.

One engine wraps one ``Endpoint`` descriptor. Every public operation checks
the descriptor's flags before touching the network, builds fresh query
parameters per request and hands them to the client's ``Transport``.

Argument and capability errors raise. Remote failures do not: a failed
single request yields ``None``, a failed member of a fan-out batch is
dropped from the merged list, and a batch where every member failed
yields ``None``. Each failure is logged at WARNING.

Session state (API key, locale) is read when a request is built. Changing
it while requests are in flight gives no guarantee about which value those
requests carry.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Optional

from gw2api.errors import (
    InvalidParameter,
    MissingArgument,
    MissingCredential,
    UnsupportedOperation,
)
from gw2api.gw2Helpers import chunked, decode, flatten, join_ids, page_total, unique_ids
from gw2api.logger import logger
from gw2api.structures import Endpoint

if TYPE_CHECKING:
    from gw2api.client import Client
    from gw2api.transport import Reply


class EndpointEngine:
    def __init__(self, client: Client, ep: Endpoint) -> None:
        self._client = client
        self.ep = ep

    def __repr__(self) -> str:
        return f"EndpointEngine({self.ep.name!r}, {self.ep.path!r})"

    def __getattr__(self, name: str) -> EndpointEngine:
        # account.bank -> "account.bank" in the client's registry
        if name.startswith("_") or "ep" not in self.__dict__:
            raise AttributeError(name)
        child = f"{self.ep.name}.{name}"
        if not self._client.has_endpoint(child):
            raise AttributeError(f"endpoint '{self.ep.name}' has no sub-resource '{name}'")
        return self._client.endpoint(child)

    @property
    def url(self) -> str:
        return self.ep.url

    def query(self, params: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """Return a fresh parameter set with credential and locale attached."""
        query = dict(params or {})
        session = self._client.session
        if self.ep.authenticated:
            if not session.api_key:
                raise MissingCredential(
                    f"endpoint '{self.ep.path}' requires an API key; call authenticate() first")
            query["access_token"] = session.api_key
        elif self.ep.optionally_authenticated and session.api_key:
            query["access_token"] = session.api_key
        if self.ep.localized:
            query["lang"] = session.locale
        return query

    def _require(self, capable: bool, operation: str) -> None:
        if not capable:
            raise UnsupportedOperation(
                f"'{operation}' cannot be used on endpoint '{self.ep.path}'")

    async def ids(self) -> Optional[list[int]]:
        """Fetch every ID this endpoint offers."""
        self._require(self.ep.bulk, "ids")
        return await self._call()

    async def get(self, id: Optional[Any] = None) -> Any:
        """Fetch one record, or the endpoint's singleton when it is not bulk."""
        if id is None and self.ep.bulk:
            raise MissingArgument(f"'get' on endpoint '{self.ep.path}' requires an ID")
        return await self._call({"id": id} if id is not None else {})

    async def many(self, ids: Optional[Iterable[Any]]) -> Optional[list[Any]]:
        """Fetch the given IDs in chunks of ``max_page_size``, concurrently."""
        self._require(self.ep.bulk, "many")
        if not ids:
            return []

        pages = [{"ids": join_ids(chunk)}
                 for chunk in chunked(unique_ids(ids), self.ep.max_page_size)]
        return await self._call_multi(pages)

    async def page(self, page: int, page_size: Optional[int] = None) -> Optional[list[Any]]:
        """Fetch one page. Pages are numbered from 1."""
        self._require(self.ep.paginated, "page")
        if isinstance(page, bool) or not isinstance(page, int):
            raise InvalidParameter(f"page must be an integer, got {page!r}")
        if page_size is not None and (isinstance(page_size, bool) or not isinstance(page_size, int)):
            raise InvalidParameter(f"page_size must be an integer, got {page_size!r}")
        if page_size is None:
            page_size = self.ep.max_page_size
        if not 0 < page_size <= self.ep.max_page_size:
            raise InvalidParameter(
                f"page_size must be between 1 and {self.ep.max_page_size}, got {page_size}")
        if page <= 0:
            raise InvalidParameter(f"page must be 1 or greater, got {page}")

        return await self._call({"page": page - 1, "page_size": page_size})

    async def all(self) -> Optional[list[Any]]:
        """Fetch the entire collection."""
        self._require(self.ep.bulk or self.ep.paginated, "all")

        if self.ep.bulk_all:
            return await self._call({"ids": "all"})

        if self.ep.paginated:
            return await self._all_pages()

        ids = await self.ids()
        if ids is None:
            return None
        return await self.many(ids)

    async def _all_pages(self) -> Optional[list[Any]]:
        size = self.ep.max_page_size
        first = await self._send({"page": 0, "page_size": size})
        if not first.ok:
            self._log_failure(first)
            return None

        items = flatten([decode(first.body)])
        total = page_total(first.headers)
        logger.debug("%s: %d page(s) of %d", self.ep.path, total, size)
        if total <= 1:
            return items

        rest = [{"page": index, "page_size": size} for index in range(1, total)]
        # pages that failed are skipped; the bootstrap page still counts
        return items + (await self._call_multi(rest) or [])

    async def _send(self, params: Optional[dict[str, Any]] = None) -> Reply:
        return await self._client.transport.issue(self.url, self.query(params))

    async def _call(self, params: Optional[dict[str, Any]] = None) -> Any:
        reply = await self._send(params)
        if not reply.ok:
            self._log_failure(reply)
            return None
        return decode(reply.body)

    async def _call_multi(self, pages: list[dict[str, Any]]) -> Optional[list[Any]]:
        if not pages:
            return []

        requests = [(self.url, self.query(page)) for page in pages]
        logger.debug("%s: fanning out %d request(s)", self.ep.path, len(requests))
        replies = await self._client.transport.issue_batch(requests)

        decoded = []
        for reply in replies:
            if not reply.ok:
                self._log_failure(reply)
                continue
            decoded.append(decode(reply.body))
        if not decoded:
            return None
        return flatten(decoded)

    def _log_failure(self, reply: Reply) -> None:
        logger.warning("%s: request failed (%s)", self.ep.path, reply.reason or reply.status_code)
