"""Exception hierarchy for the GW2 API client.

    GW2APIError (base)
    ├── ConfigurationError    - bad endpoint descriptor or unknown resource
    ├── UnsupportedOperation  - endpoint lacks the capability for the call
    ├── MissingArgument       - a required argument was omitted
    │   └── MissingCredential - authenticated endpoint, no API key set
    ├── InvalidParameter      - page/page_size/locale/id out of range
    └── DecodeError           - response body is not valid JSON

Remote failures (non-2xx replies, timeouts) are not raised; see engine.py.
"""

from __future__ import annotations


class GW2APIError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r})"


class ConfigurationError(GW2APIError):
    pass


class UnsupportedOperation(GW2APIError):
    pass


class MissingArgument(GW2APIError):
    pass


class MissingCredential(MissingArgument):
    pass


class InvalidParameter(GW2APIError):
    pass


class DecodeError(GW2APIError):
    def __init__(self, message: str, body: bytes | str = b"") -> None:
        self.body = body
        super().__init__(message)
