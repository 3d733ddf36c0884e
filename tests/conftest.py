import pathlib
import pytest

import twilio_lite.common.http_client as http_client
from twilio_lite.common.config import settings
from twilio_lite.rest.client import Client

from tests.helpers.http_client import FakeHttpClient


# ----------------------------
#  Auto-mark tests by folder
# ----------------------------

def pytest_collection_modifyitems(config, items):
    for item in items:
        p = pathlib.Path(str(item.fspath)).as_posix()
        if "/tests/unit/" in p:
            item.add_marker(pytest.mark.unit)
        elif "/tests/component/" in p:
            item.add_marker(pytest.mark.component)


@pytest.fixture(autouse=True)
def reset_http_session_singleton():
    http_client._SESSION = None
    yield
    http_client._SESSION = None


# ----------------------------
#  ENV setup: never touch a real account
# ----------------------------

@pytest.fixture(autouse=True)
def env_setup(monkeypatch):
    for var in (
        "TWILIO_ACCOUNT_SID",
        "TWILIO_AUTH_TOKEN",
        "TWILIO_API_KEY",
        "TWILIO_API_SECRET",
        "TWILIO_REGION",
        "TWILIO_EDGE",
    ):
        monkeypatch.delenv(var, raising=False)

    # settings are read at import time; pin the routing defaults
    monkeypatch.setattr(settings, "region", "", raising=True)
    monkeypatch.setattr(settings, "edge", "", raising=True)
    monkeypatch.setattr(settings, "user_agent_extensions", [], raising=True)


# ----------------------------
#  Fake transport + client
# ----------------------------

@pytest.fixture()
def fake_http():
    return FakeHttpClient()


@pytest.fixture()
def client(fake_http):
    return Client("ACaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa", "token", http_client=fake_http)
