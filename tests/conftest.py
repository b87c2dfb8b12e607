"""Shared fixtures."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from gw2api import Client, Transport
from tests.fakes import FakeAPI


@pytest.fixture
def api() -> FakeAPI:
    return FakeAPI()


@pytest.fixture
def make_client(api: FakeAPI) -> Callable[..., Client]:
    def _make(**kwargs: Any) -> Client:
        transport = Transport(httpx.AsyncClient(transport=httpx.MockTransport(api)))
        return Client(transport=transport, **kwargs)

    return _make


@pytest.fixture
def items() -> list[dict[str, Any]]:
    return [{"id": i, "name": f"Item {i}"} for i in (1, 3, 5, 7, 9)]
