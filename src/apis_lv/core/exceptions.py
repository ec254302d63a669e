"""Exceptions raised by the APIs.lv client."""


class ApisLvError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ConfigurationError(ApisLvError):
    """No API key could be resolved when constructing a client."""

    pass


class InvalidArgumentError(ApisLvError):
    """A resource method was given an argument it cannot use."""

    pass


class NetworkError(ApisLvError):
    """The HTTP transport failed to fetch a URL."""

    def __init__(self, message: str, url: str, status_code: int | None = None):
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class ParseError(ApisLvError):
    """A response body could not be decoded as JSON."""

    def __init__(self, message: str, url: str | None = None):
        self.url = url
        super().__init__(message)
