"""Resource and format identifiers of the APIs.lv service."""

from enum import Enum


class Resource(str, Enum):
    """Resources served by APIs.lv."""

    NAMEDAYS = "namedays"
    BANKS = "banks"
    COUNTRIES = "countries"
    CURRENCY_RATES = "currencyrates"


class Format(str, Enum):
    """Output shapes a request can be materialized in.

    JSON and XML are also the URL suffixes sent to the server. PARSED is
    fetched as JSON and decoded locally.
    """

    JSON = "json"
    XML = "xml"
    PARSED = "parsed"
