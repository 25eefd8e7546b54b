import logging
from typing import Optional

from shorturl_app.schemas.url import ShortLink
from shorturl_app.services.short_code_factory import ShortCodeFactory
from shorturl_app.services.short_code_strategies import ShortCodeStrategy
from shorturl_app.store.strategies import AddressStore


logger = logging.getLogger(__name__)

ALLOWED_SCHEMES = ("http://", "https://")
DEFAULT_SCHEME = "https://"


class EmptyURLError(ValueError):
    """Raised when a shorten request carries no URL"""


def normalize_url(url: str) -> str:
    """Prefix https:// unless the URL already starts with http:// or https://"""
    if url.startswith(ALLOWED_SCHEMES):
        return url
    return DEFAULT_SCHEME + url


class URLService:
    """
    URL Service with dependency injection for the address store.

    The store is injected (not created internally), so every request
    handler works against the same explicitly owned map and tests can
    hand in their own.
    """

    def __init__(
        self,
        store: AddressStore,
        short_code_strategy: Optional[ShortCodeStrategy] = None
    ):
        """
        Initialize URL service with dependencies.

        Args:
            store: Address store holding token -> URL mappings
            short_code_strategy: Token generator (defaults to the configured one)
        """
        self.store = store
        self.short_code_strategy = short_code_strategy or ShortCodeFactory.create_strategy()

    def create_short_url(self, url: str) -> ShortLink:
        """Create a new short URL

        Always issues a new token, even if the same URL was shortened before.
        A token collision replaces the older mapping.

        Raises:
            EmptyURLError: If url is empty (the store is left untouched)
        """
        if not url:
            raise EmptyURLError("URL must not be empty")

        long_url = normalize_url(url)
        token = self.short_code_strategy.generate()
        self.store.put(token, long_url)
        logger.info("Shortened %s -> %s", long_url, token)

        return ShortLink(token=token, long_url=long_url)

    def get_long_url(self, token: str) -> Optional[str]:
        """Get the original URL for a token, or None if it was never issued"""
        long_url = self.store.get(token)
        if long_url is None:
            logger.debug("Unknown token requested: %s", token)
        return long_url

    def get_link(self, token: str) -> Optional[ShortLink]:
        long_url = self.get_long_url(token)
        if long_url is None:
            return None
        return ShortLink(token=token, long_url=long_url)
