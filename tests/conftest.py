"""Shared fixtures - fake HTTP responses and an isolated environment."""

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import structlog

from didprofile.config import ServiceConfig


FIXTURES_DIR = Path(__file__).parent / "fixtures"

BASE_URL = "https://pds.test"
SECRET_NAME = "pds/util-account"
CREDENTIALS = {
    "username": "util.pds.test",
    "password": "hunter2-app-password",
    "did": "did:plc:utilaccount",
}

_ENV_VARS = (
    "ATPROTO_BASE_URL",
    "PDS_UTIL_ACCOUNT_CREDS",
    "UTIL_ACCOUNT_SECRET_NAME",
    "AWS_REGION",
    "DIDPROFILE_ATPROTO_BASE_URL",
    "DIDPROFILE_AWS_REGION",
    "DIDPROFILE_LOG_LEVEL",
    "DIDPROFILE_LOG_FORMAT",
)


def load_fixture(name: str) -> dict:
    """Load a JSON fixture as a dict."""
    return json.loads((FIXTURES_DIR / f"{name}.json").read_text(encoding="utf-8"))


def make_response(status_code: int = 200, body=None, text: str | None = None) -> MagicMock:
    """Build a stand-in for requests.Response."""
    raw = text if text is not None else json.dumps(body)
    response = MagicMock()
    response.status_code = status_code
    response.text = raw
    response.content = raw.encode("utf-8")
    return response


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Keep host environment and .env files out of the tests."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()


@pytest.fixture
def config() -> ServiceConfig:
    return ServiceConfig(
        atproto_base_url=BASE_URL,
        util_account_secret_name=SECRET_NAME,
    )


@pytest.fixture
def resolver() -> MagicMock:
    """Secret resolver returning valid utility-account credentials."""
    mock = MagicMock()
    mock.get_secret.return_value = json.dumps(CREDENTIALS)
    return mock


@pytest.fixture
def http() -> MagicMock:
    """Stand-in for requests.Session."""
    return MagicMock()
