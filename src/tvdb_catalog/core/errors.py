"""Errors raised by the catalog client."""

from typing import Optional


class CatalogError(Exception):
    """Base class for every error raised by the catalog client."""


class ConfigurationError(CatalogError):
    """The client was asked for something its configuration cannot provide."""


class TransportError(CatalogError):
    """Fetching an endpoint failed before a usable body was received."""

    def __init__(self, message: str, url: str = "", status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class MalformedDocument(CatalogError):
    """A response body could not be decoded under the requested shape."""

    def __init__(self, message: str, shape: str = ""):
        super().__init__(message)
        self.shape = shape


class UnexpectedResultCount(CatalogError):
    """A single-result query did not decode to exactly one series."""

    def __init__(self, count: int):
        super().__init__(f"Expected exactly one series, got {count}")
        self.count = count


class InvalidCatalogID(CatalogError, ValueError):
    """A scraped series ID does not fit an unsigned 64-bit integer."""

    def __init__(self, raw: str):
        super().__init__(f"Invalid catalog ID: {raw!r}")
        self.raw = raw
