from dataclasses import dataclass
from typing import Optional

from gw2api.errors import ConfigurationError

BASE_URL = "https://api.guildwars2.com"
DEFAULT_LOCALE = "en"
SUPPORTED_LOCALES = ("en", "es", "de", "fr", "zh")
DEFAULT_MAX_PAGE_SIZE = 200

CAPABILITIES = (
    "authenticated",
    "optionally_authenticated",
    "bulk",
    "bulk_all",
    "paginated",
    "localized",
)


@dataclass(frozen=True)
class Endpoint:
    name: str
    path: str
    base_url: str = BASE_URL
    authenticated: bool = False
    optionally_authenticated: bool = False
    bulk: bool = False
    bulk_all: bool = False
    paginated: bool = False
    localized: bool = False
    max_page_size: int = DEFAULT_MAX_PAGE_SIZE

    def __post_init__(self) -> None:
        if not self.path.startswith("/"):
            raise ConfigurationError(f"endpoint path must start with '/': {self.path!r}")
        if isinstance(self.max_page_size, bool) or not isinstance(self.max_page_size, int) \
                or self.max_page_size <= 0:
            raise ConfigurationError(
                f"max_page_size must be a positive integer, got {self.max_page_size!r}")
        if self.bulk_all and not (self.bulk or self.paginated):
            raise ConfigurationError(f"'{self.path}': bulk_all requires bulk or paginated")

    @property
    def url(self) -> str:
        return f"{self.base_url.rstrip('/')}{self.path}"

    def flags(self) -> list[str]:
        return [cap for cap in CAPABILITIES if getattr(self, cap)]


@dataclass
class Session:
    api_key: Optional[str] = None
    locale: str = DEFAULT_LOCALE
