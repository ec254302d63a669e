"""A single APIs.lv request and its output formats."""

import json
from typing import Any
from urllib.parse import urlencode

from .core.exceptions import InvalidArgumentError, ParseError
from .core.http import HTTPClient, redact_url
from .models import Format, Resource


class Request:
    """An API request waiting to be fetched.

    Nothing goes over the network until one of the format methods is called,
    and every call fetches again:

        request = Api("my-key").namedays_for_date(12, 31)
        request.as_json()    # '["Silvestrs","Silvis","Kalvis"]'
        request.as_parsed()  # ['Silvestrs', 'Silvis', 'Kalvis']
    """

    def __init__(
        self,
        key: str,
        resource: Resource | str,
        params: dict[str, Any] | None = None,
        *,
        base_url: str,
        http: HTTPClient,
    ):
        """Initialize the request.

        Args:
            key: API key, sent as the `key` query parameter.
            resource: The API to fetch.
            params: Query string parameters. None values are left out.
            base_url: Service root the resource path is appended to.
            http: Transport used for fetching.
        """
        try:
            self.resource = Resource(resource).value
        except ValueError as e:
            raise InvalidArgumentError(f"Unknown resource: {resource!r}") from e
        self._params = dict(params or {})
        self._params["key"] = key
        self.base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self.http = http

    @property
    def params(self) -> dict[str, Any]:
        """Query parameters including the key (a copy)."""
        return dict(self._params)

    def query_string(self) -> str:
        """URL-encode the parameters, dropping those whose value is None."""
        return urlencode({k: v for k, v in self._params.items() if v is not None})

    def build_url(self, fmt: Format | str) -> str:
        """Return the URL fetched for the given wire format ('json' or 'xml')."""
        suffix = Format(fmt)
        if suffix is Format.PARSED:
            suffix = Format.JSON
        return f"{self.base_url}{self.resource}.{suffix.value}?{self.query_string()}"

    def as_json(self) -> str:
        """Return the data as a JSON string.

        Raises:
            NetworkError: If the fetch fails.
        """
        return self.http.get_text(self.build_url(Format.JSON))

    def as_xml(self) -> str:
        """Return the data as an XML string.

        Raises:
            NetworkError: If the fetch fails.
        """
        return self.http.get_text(self.build_url(Format.XML))

    def as_parsed(self) -> Any:
        """Return the data decoded from JSON into lists, dicts and scalars.

        Raises:
            NetworkError: If the fetch fails.
            ParseError: If the server returned something that is not JSON.
        """
        text = self.as_json()
        try:
            return json.loads(text)
        except (ValueError, RecursionError) as e:
            url = self.build_url(Format.JSON)
            raise ParseError(
                f"Invalid JSON from {redact_url(url)}: {e}", url=url
            ) from e

    def fetch(self, fmt: Format | str) -> Any:
        """Return the data in the given format."""
        try:
            fmt = Format(fmt)
        except ValueError as e:
            raise InvalidArgumentError(f"Unknown format: {fmt!r}") from e
        if fmt is Format.XML:
            return self.as_xml()
        if fmt is Format.PARSED:
            return self.as_parsed()
        return self.as_json()

    def __repr__(self) -> str:
        params = {k: v for k, v in self._params.items() if k != "key"}
        return f"Request(resource={self.resource!r}, params={params!r})"
