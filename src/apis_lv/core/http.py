"""HTTP client with integrated logging and error mapping."""

import time
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import httpx

from . import config
from .exceptions import NetworkError
from .logging import get_logger

logger = get_logger("http")

SECRET_PARAMS = ("key",)


def redact_url(url: str) -> str:
    """Return `url` with secret query parameters masked, for logs and messages."""
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL:
        return _redact_unparsed(url)
    secrets = [name for name in SECRET_PARAMS if name in parsed.params]
    if not secrets:
        return url
    for name in secrets:
        parsed = parsed.copy_set_param(name, "REDACTED")
    return str(parsed)


def _redact_unparsed(url: str) -> str:
    """Mask secrets in a URL httpx refuses to parse; drop the query if that fails too."""
    try:
        parts = urlsplit(url)
        pairs = parse_qsl(parts.query, keep_blank_values=True)
    except ValueError:
        return url.split("?", 1)[0]
    pairs = [(k, "REDACTED" if k in SECRET_PARAMS else v) for k, v in pairs]
    return urlunsplit(parts._replace(query=urlencode(pairs)))


class HTTPClient:
    """Synchronous HTTP client with logging and uniform error handling.

    This client wraps httpx and adds:
    - Structured logging of all requests (with the API key masked)
    - A single failure type, NetworkError, for every transport problem

    Example:
        client = HTTPClient("apis.lv")
        body = client.get_text("http://apis.lv/namedays.json?key=...")
    """

    def __init__(
        self,
        api_name: str = "apis.lv",
        timeout: float | None = config.HTTP_TIMEOUT,
        follow_redirects: bool = True,
    ):
        """Initialize HTTP client.

        Args:
            api_name: Name of the API for logging.
            timeout: Request timeout in seconds. None keeps the httpx default.
            follow_redirects: Whether to follow HTTP redirects.
        """
        self.api_name = api_name
        self.timeout = timeout
        self.follow_redirects = follow_redirects

    def _client_options(self) -> dict:
        options: dict = {"follow_redirects": self.follow_redirects}
        if self.timeout is not None:
            options["timeout"] = self.timeout
        return options

    def get(self, url: str) -> httpx.Response:
        """Make a GET request with logging.

        Args:
            url: Absolute URL, query string included.

        Returns:
            httpx.Response object with a success status.

        Raises:
            NetworkError: On an unusable URL, connection failure, timeout or
                non-success status.
        """
        safe_url = redact_url(url)

        logger.debug("request_start", api=self.api_name, method="GET", url=safe_url)

        start_time = time.perf_counter()

        with httpx.Client(**self._client_options()) as client:
            try:
                response = client.get(url)

                duration_ms = (time.perf_counter() - start_time) * 1000

                logger.info(
                    "request_complete",
                    api=self.api_name,
                    method="GET",
                    url=safe_url,
                    status=response.status_code,
                    duration_ms=round(duration_ms, 2),
                )

                try:
                    response.raise_for_status()
                except httpx.HTTPStatusError as e:
                    raise NetworkError(
                        f"HTTP {e.response.status_code} while reading {safe_url}",
                        url=url,
                        status_code=e.response.status_code,
                    ) from e

                return response

            except httpx.TimeoutException as e:
                duration_ms = (time.perf_counter() - start_time) * 1000
                logger.error(
                    "request_timeout",
                    api=self.api_name,
                    method="GET",
                    url=safe_url,
                    duration_ms=round(duration_ms, 2),
                    error=str(e),
                )
                raise NetworkError(f"Request timed out: {safe_url}", url=url) from e

            except (httpx.RequestError, httpx.InvalidURL) as e:
                duration_ms = (time.perf_counter() - start_time) * 1000
                logger.error(
                    "request_failed",
                    api=self.api_name,
                    method="GET",
                    url=safe_url,
                    duration_ms=round(duration_ms, 2),
                    error=str(e),
                )
                raise NetworkError(f"Cannot read {safe_url}: {e}", url=url) from e

    def get_text(self, url: str) -> str:
        """Make a GET request and return the response body as text.

        Raises:
            NetworkError: On request failure or an empty body.
        """
        response = self.get(url)
        if not response.content:
            logger.error("empty_response", api=self.api_name, url=redact_url(url))
            raise NetworkError(f"Empty response from {redact_url(url)}", url=url)
        return response.text
