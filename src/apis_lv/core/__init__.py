"""Core module for configuration, logging, errors and the HTTP client."""

from .exceptions import (
    ApisLvError,
    ConfigurationError,
    InvalidArgumentError,
    NetworkError,
    ParseError,
)
from .http import HTTPClient
from .logging import get_logger, setup_logging

__all__ = [
    "setup_logging",
    "get_logger",
    "HTTPClient",
    "ApisLvError",
    "ConfigurationError",
    "InvalidArgumentError",
    "NetworkError",
    "ParseError",
]
