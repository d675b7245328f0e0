"""Error hierarchy shared by the upstream clients."""

from __future__ import annotations


class ProviderError(Exception):
    """Raised when an upstream provider cannot fulfill a request."""


class UpstreamTransportError(ProviderError):
    """The request never produced an HTTP response (timeout, connection error)."""


class UpstreamStatusError(ProviderError):
    """The upstream answered with a non-success HTTP status."""

    def __init__(self, message: str, *, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class UnexpectedPayloadError(ProviderError):
    """The upstream answered 200 but the body could not be interpreted."""


class CountryNotFoundError(UpstreamStatusError):
    """The country provider reports that the requested code does not exist."""

    def __init__(self, code: str) -> None:
        super().__init__(f"Country '{code}' not found", status_code=404)
        self.code = code
