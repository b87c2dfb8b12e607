"""Fake GW2 API served through httpx.MockTransport."""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Any, Optional

import httpx

Handler = Callable[[httpx.Request], Any]


def json_response(data: Any, status: int = 200, headers: Optional[dict[str, str]] = None) -> httpx.Response:
    return httpx.Response(status, json=data, headers=headers)


def collection(records: list[dict[str, Any]]) -> Handler:
    """Serve ``records`` the way a bulk/paginated GW2 endpoint does."""
    by_id = {record["id"]: record for record in records}

    def handler(request: httpx.Request) -> httpx.Response:
        params = request.url.params
        if "ids" in params:
            if params["ids"] == "all":
                return json_response(records)
            wanted = [int(i) for i in params["ids"].split(",")]
            found = [by_id[i] for i in wanted if i in by_id]
            if not found:
                return json_response({"text": "all ids provided are invalid"}, 404)
            return json_response(found, 206 if len(found) < len(wanted) else 200)
        if "id" in params:
            record = by_id.get(int(params["id"]))
            if record is None:
                return json_response({"text": "no such id"}, 404)
            return json_response(record)
        if "page" in params:
            page = int(params["page"])
            size = int(params.get("page_size", 50))
            total = max(1, math.ceil(len(records) / size))
            if page >= total:
                return json_response({"text": f"page out of range. Use page values 0 - {total - 1}."}, 400)
            return json_response(records[page * size:(page + 1) * size],
                                 headers={"X-Page-Total": str(total)})
        return json_response([record["id"] for record in records])

    return handler


class FakeAPI:
    """Routes requests by path and records every request it sees."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.routes: dict[str, Handler] = {}

    def route(self, path: str, handler: Handler) -> None:
        self.routes[path] = handler

    def params(self) -> list[dict[str, str]]:
        return [dict(request.url.params) for request in self.requests]

    def __call__(self, request: httpx.Request) -> Any:
        self.requests.append(request)
        handler = self.routes.get(request.url.path)
        if handler is None:
            return json_response({"text": "not found"}, 404)
        return handler(request)
