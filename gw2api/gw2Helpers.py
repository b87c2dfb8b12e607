import json
from collections.abc import Iterable, Mapping
from typing import Any, Optional

from gw2api.errors import DecodeError, InvalidParameter

SUCCESS_CODES = (200, 206)
PAGE_TOTAL_HEADER = "X-Page-Total"


def decode(body: bytes | str) -> Any:
    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(f"response body is not valid JSON: {e}", body) from e


def unique_ids(ids: Iterable[Any]) -> list[int]:
    try:
        # dict keeps first-occurrence order
        return list(dict.fromkeys(int(i) for i in ids))
    except (TypeError, ValueError) as e:
        raise InvalidParameter(f"ids must be integers: {e}") from e


def chunked(ids: list[int], size: int) -> list[list[int]]:
    return [ids[i:i + size] for i in range(0, len(ids), size)]


def join_ids(chunk: Iterable[int]) -> str:
    return ",".join(str(i) for i in chunk)


def page_total(headers: Optional[Mapping[str, str]]) -> int:
    raw = (headers or {}).get(PAGE_TOTAL_HEADER)
    try:
        return max(1, int(raw))
    except (TypeError, ValueError):
        return 1


def flatten(values: Iterable[Any]) -> list[Any]:
    out: list[Any] = []
    for value in values:
        if isinstance(value, list):
            out.extend(value)
        else:
            out.append(value)
    return out
