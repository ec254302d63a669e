"""Pytest fixtures and configuration for apis-lv tests."""

import pytest
import respx
import structlog

from apis_lv import Api

BASE_URL = "http://apis.lv/"
TEST_KEY = "test-key-123"

SAMPLE_NAMEDAYS_JSON = '["Silvestrs","Silvis","Kalvis"]'
SAMPLE_NAMEDAYS_XML = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    "<namedays><name>Silvestrs</name><name>Silvis</name><name>Kalvis</name></namedays>"
)
SAMPLE_BANKS_JSON = '[{"code":"HABALV22","name":"Swedbank"}]'
SAMPLE_COUNTRIES_JSON = '[{"code":"LV","name":"Latvija"}]'
SAMPLE_RATES_JSON = '{"date":"2020-01-15","rates":{"USD":1.1142}}'


@pytest.fixture(autouse=True)
def reset_default_key():
    """Make sure no process-wide key leaks between tests."""
    Api.clear_default_key()
    yield
    Api.clear_default_key()


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo setup_logging so cached loggers do not bypass capture_logs."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def api():
    """Create a client with an explicit key."""
    return Api(TEST_KEY, base_url=BASE_URL)


@pytest.fixture
def mock_api():
    """Fixture to mock the APIs.lv service using respx."""
    with respx.mock(assert_all_called=False) as mock:
        mock.get(url__regex=r".*/namedays\.json.*").respond(text=SAMPLE_NAMEDAYS_JSON)
        mock.get(url__regex=r".*/namedays\.xml.*").respond(text=SAMPLE_NAMEDAYS_XML)
        mock.get(url__regex=r".*/banks\.json.*").respond(text=SAMPLE_BANKS_JSON)
        mock.get(url__regex=r".*/countries\.json.*").respond(text=SAMPLE_COUNTRIES_JSON)
        mock.get(url__regex=r".*/currencyrates\.json.*").respond(text=SAMPLE_RATES_JSON)
        yield mock
