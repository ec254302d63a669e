"""Client for the APIs.lv data service (namedays, banks, countries, currency rates)."""

__version__ = "0.1.0"

from .client import Api
from .core import (
    ApisLvError,
    ConfigurationError,
    HTTPClient,
    InvalidArgumentError,
    NetworkError,
    ParseError,
    setup_logging,
)
from .models import Format, Resource
from .request import Request

__all__ = [
    "Api",
    "Request",
    "Format",
    "Resource",
    "HTTPClient",
    "ApisLvError",
    "ConfigurationError",
    "InvalidArgumentError",
    "NetworkError",
    "ParseError",
    "setup_logging",
    "__version__",
]
