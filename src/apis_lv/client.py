"""APIs.lv client: key management and one request builder per resource."""

from datetime import datetime
from typing import Any, ClassVar

from .core import config
from .core.exceptions import ConfigurationError, InvalidArgumentError
from .core.http import HTTPClient
from .core.logging import get_logger
from .models import Resource
from .request import Request

logger = get_logger("client")


class Api:
    """Builds requests against the APIs.lv service.

    Basic usage:

        api = Api("put-your-api-key-here")
        api.namedays_for_date(12, 31).as_json()
        # '["Silvestrs","Silvis","Kalvis"]'

    The key can also be set once for the whole process:

        Api.set_default_key("put-your-api-key-here")
        api = Api()

    The default is a plain class attribute with no locking. Set it at startup,
    before clients are created from other threads.
    """

    _default_key: ClassVar[str | None] = None

    def __init__(
        self,
        key: str | None = None,
        *,
        base_url: str | None = None,
        http: HTTPClient | None = None,
    ):
        """Initialize the client.

        Args:
            key: Your API key. Falls back to the process-wide default.
            base_url: Service root. Defaults to APIS_LV_BASE_URL.
            http: Transport shared by the requests this client builds.

        Raises:
            ConfigurationError: If neither `key` nor a default key is set.
        """
        if key:
            self._key = key
        elif Api._default_key:
            self._key = Api._default_key
        else:
            raise ConfigurationError(
                "No API key available: pass one to Api() or call Api.set_default_key()"
            )
        self.base_url = base_url or config.APIS_LV_BASE_URL
        self.http = http or HTTPClient()

    @classmethod
    def set_default_key(cls, key: str) -> None:
        """Set the key used by clients created later without one."""
        Api._default_key = key
        logger.debug("default_key_set")

    @classmethod
    def clear_default_key(cls) -> None:
        """Forget the process-wide default key."""
        Api._default_key = None

    @property
    def key(self) -> str:
        return self._key

    def namedays(self) -> Request:
        """Namedays for every day of the year."""
        return self._request(Resource.NAMEDAYS)

    def namedays_for_date(self, month: int, day: int) -> Request:
        """Namedays on a given date.

        Month and day are sent as given, e.g. (1, 5) becomes `date=1-5`.
        Out-of-range values are not checked here.
        """
        return self._request(Resource.NAMEDAYS, {"date": f"{month}-{day}"})

    def banks(self, language: str | None = None) -> Request:
        """List of banks.

        Args:
            language: Language for internationalized names. Omitted when None.
        """
        return self._request(Resource.BANKS, {"lang": language})

    def countries(self, language: str | None = None) -> Request:
        """List of countries.

        Args:
            language: Language for internationalized country names. Omitted when None.
        """
        return self._request(Resource.COUNTRIES, {"lang": language})

    def currency_rates(self, date: int | None = None) -> Request:
        """Currency rates for the given date.

        Args:
            date: Unix timestamp, rendered as YYYY-MM-DD in local time.
                Leave as None for today's rates.

        Raises:
            InvalidArgumentError: If `date` is not an integer.
        """
        if date is not None:
            if not isinstance(date, int) or isinstance(date, bool):
                raise InvalidArgumentError(
                    f"currency_rates() expects date to be an integer timestamp, "
                    f"got {type(date).__name__}"
                )
            try:
                date = datetime.fromtimestamp(date).strftime("%Y-%m-%d")
            except (OverflowError, OSError, ValueError) as e:
                raise InvalidArgumentError(f"Timestamp out of range: {date}") from e

        return self._request(Resource.CURRENCY_RATES, {"date": date})

    def _request(self, resource: Resource, params: dict[str, Any] | None = None) -> Request:
        return Request(self._key, resource, params, base_url=self.base_url, http=self.http)
