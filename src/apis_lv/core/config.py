"""Centralized configuration from environment variables."""

import os

from dotenv import load_dotenv

load_dotenv()


def _get_optional_float(key: str) -> float | None:
    """Get float value from environment variable, or None when unset."""
    value = os.getenv(key)
    if value is not None:
        try:
            return float(value)
        except ValueError:
            pass
    return None


def _get_str(key: str, default: str) -> str:
    """Get string value from environment variable."""
    return os.getenv(key, default)


# =============================================================================
# Base URL
# =============================================================================
APIS_LV_BASE_URL = _get_str("APIS_LV_BASE_URL", "http://apis.lv/")

# =============================================================================
# HTTP
# =============================================================================
# None leaves the httpx default timeout in place
HTTP_TIMEOUT = _get_optional_float("HTTP_TIMEOUT")

# =============================================================================
# Logging
# =============================================================================
LOG_LEVEL = _get_str("LOG_LEVEL", "INFO")
LOG_FORMAT = _get_str("LOG_FORMAT", "console")
