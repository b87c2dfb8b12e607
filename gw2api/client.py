"""Client: session state plus a lazily built engine per resource."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from gw2api.endpoints import ENDPOINTS
from gw2api.engine import EndpointEngine
from gw2api.errors import ConfigurationError, InvalidParameter
from gw2api.structures import DEFAULT_LOCALE, SUPPORTED_LOCALES, Endpoint, Session
from gw2api.transport import Transport


class Client:
    """Entry point for the API.

    Example:
        >>> async with Client() as gw2:
        ...     gw2.authenticate(key)
        ...     bank = await gw2.account.bank.get()
        ...     swords = await gw2.items.many([24, 46, 56])
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        locale: str = DEFAULT_LOCALE,
        transport: Optional[Transport] = None,
        endpoints: Optional[Mapping[str, Endpoint]] = None,
    ) -> None:
        self.session = Session(api_key=api_key)
        self.locale = locale
        self.transport = transport or Transport()
        self._endpoints = dict(ENDPOINTS if endpoints is None else endpoints)
        self._engines: dict[str, EndpointEngine] = {}

    def authenticate(self, api_key: str) -> Client:
        self.session.api_key = api_key
        return self

    @property
    def api_key(self) -> Optional[str]:
        return self.session.api_key

    @property
    def locale(self) -> str:
        return self.session.locale

    @locale.setter
    def locale(self, value: str) -> None:
        if value not in SUPPORTED_LOCALES:
            raise InvalidParameter(
                f"unsupported locale {value!r}; expected one of {', '.join(SUPPORTED_LOCALES)}")
        self.session.locale = value

    @property
    def endpoints(self) -> Mapping[str, Endpoint]:
        return self._endpoints

    def has_endpoint(self, name: str) -> bool:
        return name in self._endpoints

    def endpoint(self, name: str) -> EndpointEngine:
        engine = self._engines.get(name)
        if engine is None:
            try:
                ep = self._endpoints[name]
            except KeyError:
                raise ConfigurationError(f"unknown endpoint {name!r}") from None
            engine = self._engines[name] = EndpointEngine(self, ep)
        return engine

    @property
    def account(self) -> EndpointEngine:
        return self.endpoint("account")

    @property
    def items(self) -> EndpointEngine:
        return self.endpoint("items")

    @property
    def recipes(self) -> EndpointEngine:
        return self.endpoint("recipes")

    @property
    def worlds(self) -> EndpointEngine:
        return self.endpoint("worlds")

    async def aclose(self) -> None:
        await self.transport.aclose()

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
