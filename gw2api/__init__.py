"""Async client for the Guild Wars 2 API."""

from gw2api.client import Client
from gw2api.endpoints import ENDPOINTS
from gw2api.engine import EndpointEngine
from gw2api.errors import (
    ConfigurationError,
    DecodeError,
    GW2APIError,
    InvalidParameter,
    MissingArgument,
    MissingCredential,
    UnsupportedOperation,
)
from gw2api.logger import configure_logging
from gw2api.structures import Endpoint, Session
from gw2api.transport import Reply, Transport

__version__ = "0.1.0"

__all__ = [
    "Client",
    "ConfigurationError",
    "DecodeError",
    "ENDPOINTS",
    "Endpoint",
    "EndpointEngine",
    "GW2APIError",
    "InvalidParameter",
    "MissingArgument",
    "MissingCredential",
    "Reply",
    "Session",
    "Transport",
    "UnsupportedOperation",
    "configure_logging",
]
