import os
import time
from typing import Any, Optional

from gw2api.client import Client
from gw2api.errors import MissingCredential
from gw2api.logger import logger
from gw2api.structures import Endpoint


LATEST: dict[str, dict[str, Any]] = {}


def probe_params(ep: Endpoint) -> dict[str, Any]:
    # cheapest request that still exercises the endpoint
    if ep.paginated:
        return {"page": 0, "page_size": 1}
    return {}


async def check_endpoint(client: Client, ep: Endpoint) -> dict[str, Any]:
    result: dict[str, Any] = {
        "name": ep.name,
        "url": ep.url,
        "flags": ep.flags(),
        "ts": time.strftime("%Y-%m-%d %H:%M:%S"),
        "status_code": None,
        "latency_ms": None,
        "body_len": None,
        "ok": False,
        "reason": "",
    }

    engine = client.endpoint(ep.name)
    try:
        params = engine.query(probe_params(ep))
    except MissingCredential:
        result["reason"] = "no api key"
        return result

    reply = await client.transport.issue(engine.url, params)
    result["status_code"] = reply.status_code
    result["latency_ms"] = reply.latency_ms
    result["body_len"] = len(reply.body)
    result["reason"] = reply.reason
    result["ok"] = reply.ok

    if reply.ok and not reply.body:
        result["ok"] = False
        result["reason"] = f"{reply.status_code} but empty body"

    if not result["ok"]:
        logger.warning("check %s failed: %s", ep.name, result["reason"])
    return result


async def run_checks_once(client: Optional[Client] = None) -> None:
    if client is None:
        async with Client(api_key=os.environ.get("GW2_API_KEY")) as client:
            await run_checks_once(client)
        return

    for ep in client.endpoints.values():
        LATEST[ep.name] = await check_endpoint(client, ep)
