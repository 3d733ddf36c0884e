import json

import pytest

from twilio_lite.adapters.twilio_http_client import Response
from twilio_lite.base.domain import Domain
from twilio_lite.base.exceptions import TwilioException, TwilioRestException
from twilio_lite.base.page import Page
from twilio_lite.base.version import Version


class ThingPage(Page):
    def get_instance(self, payload):
        return ("thing", payload["sid"], self._solution.get("parent"))


@pytest.fixture()
def version(client):
    return Version(Domain(client, "https://api.twilio.com"), "2010-04-01")


def _resp(payload, status_code=200):
    return Response(status_code=status_code, text=json.dumps(payload), url="https://api.twilio.com/x")


def test_records_under_meta_key(version):
    page = ThingPage(version, _resp({
        "things": [{"sid": "a"}, {"sid": "b"}],
        "meta": {"key": "things", "next_page_url": "https://api.twilio.com/v1/Things?Page=1"},
    }), {"parent": "P"})

    assert list(page) == [("thing", "a", "P"), ("thing", "b", "P")]
    assert len(page) == 2
    assert page.next_page_url == "https://api.twilio.com/v1/Things?Page=1"
    assert page.previous_page_url is None


def test_records_under_single_non_meta_key(version):
    page = ThingPage(version, _resp({
        "usage_records": [{"sid": "a"}],
        "page": 0,
        "page_size": 50,
        "first_page_uri": "/2010-04-01/x?Page=0",
        "next_page_uri": "/2010-04-01/x?Page=1",
        "previous_page_uri": None,
        "start": 0,
        "end": 0,
        "uri": "/2010-04-01/x",
    }))

    assert page.instances == [("thing", "a", None)]
    assert page.next_page_url == "https://api.twilio.com/2010-04-01/x?Page=1"
    assert page.previous_page_url is None


def test_ambiguous_payload_rejected(version):
    with pytest.raises(TwilioException):
        ThingPage(version, _resp({"a": [], "b": []}))


def test_non_200_raises_rest_exception(version):
    with pytest.raises(TwilioRestException) as e:
        ThingPage(version, _resp({"message": "Not found", "code": 20404}, status_code=404))
    assert e.value.status == 404
    assert e.value.code == 20404


def test_next_page_requests_url_and_keeps_class(version, fake_http):
    fake_http.add("GET", "https://api.twilio.com/v1/Things?Page=1", {
        "things": [{"sid": "c"}],
        "meta": {"key": "things", "next_page_url": None, "previous_page_url": "https://api.twilio.com/v1/Things?Page=0"},
    })
    page = ThingPage(version, _resp({
        "things": [{"sid": "a"}],
        "meta": {"key": "things", "next_page_url": "https://api.twilio.com/v1/Things?Page=1"},
    }), {"parent": "P"})

    nxt = page.next_page()

    assert isinstance(nxt, ThingPage)
    assert list(nxt) == [("thing", "c", "P")]
    assert nxt.next_page() is None
    assert nxt.previous_page_url == "https://api.twilio.com/v1/Things?Page=0"
    assert fake_http.urls() == ["https://api.twilio.com/v1/Things?Page=1"]


def test_base_page_has_no_instances(version):
    page = Page(version, _resp({"things": [{"sid": "a"}], "meta": {"key": "things"}}))
    with pytest.raises(NotImplementedError):
        list(page)
