"""Errors raised while talking to the quote provider."""


class FetchError(Exception):
    """Base class for failed quote or chart fetches."""


class NetworkError(FetchError):
    """No usable response: transport failure, timeout or non-2xx status."""


class DecodeError(FetchError):
    """The response body does not match the expected JSON shape."""
