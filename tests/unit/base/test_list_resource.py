import json

import pytest
import requests

from twilio_lite.base.domain import Domain
from twilio_lite.base.exceptions import TwilioRestException
from twilio_lite.base.list_resource import ListResource
from twilio_lite.base.page import Page
from twilio_lite.base.version import Version

BASE = "https://example.twilio.com/v1/Things"


class ThingPage(Page):
    def get_instance(self, payload):
        return payload["sid"]


class ThingList(ListResource):
    _page_class = ThingPage

    def __init__(self, version):
        super().__init__(version)
        self._uri = "/Things"


def _page(sids, next_url=None):
    return {
        "things": [{"sid": s} for s in sids],
        "meta": {"key": "things", "next_page_url": next_url},
    }


@pytest.fixture()
def things(client):
    return ThingList(Version(Domain(client, "https://example.twilio.com"), "v1"))


@pytest.fixture()
def three_pages(fake_http):
    fake_http.add("GET", f"{BASE}?PageSize=2", _page(["a", "b"], f"{BASE}?PageSize=2&Page=1"))
    fake_http.add("GET", f"{BASE}?PageSize=2&Page=1", _page(["c", "d"], f"{BASE}?PageSize=2&Page=2"))
    fake_http.add("GET", f"{BASE}?PageSize=2&Page=2", _page(["e"]))
    return fake_http


def test_page_sends_only_supplied_params(things, fake_http):
    fake_http.add("GET", f"{BASE}?PageToken=PT1&Page=3&PageSize=10", _page(["x"]))

    page = things.page(page_token="PT1", page_number=3, page_size=10)

    assert list(page) == ["x"]
    assert fake_http.requests[0].params == {"PageToken": "PT1", "Page": 3, "PageSize": 10}


def test_list_equals_concatenated_pages(things, three_pages):
    expected = []
    page = things.page(page_size=2)
    while page is not None:
        expected.extend(page)
        page = page.next_page()

    assert things.list(page_size=2) == expected == ["a", "b", "c", "d", "e"]


def test_list_never_exceeds_limit(things, three_pages):
    out = things.list(limit=3, page_size=2)
    assert out == ["a", "b", "c"]
    # third page never requested
    assert three_pages.urls() == [f"{BASE}?PageSize=2", f"{BASE}?PageSize=2&Page=1"]


def test_limit_without_page_size_asks_for_limit_records(things, fake_http):
    fake_http.add("GET", f"{BASE}?PageSize=3", _page(["a", "b", "c"], f"{BASE}?PageSize=3&Page=1"))

    assert things.list(limit=3) == ["a", "b", "c"]
    assert len(fake_http.requests) == 1


def test_get_page_by_url(things, three_pages):
    page = things.get_page(f"{BASE}?PageSize=2&Page=2")
    assert list(page) == ["e"]


def test_each_delivers_all_and_completes_once(things, three_pages):
    seen, done_calls = [], []

    things.each(lambda thing, stop: seen.append(thing), page_size=2, done=done_calls.append)

    assert seen == ["a", "b", "c", "d", "e"]
    assert done_calls == [None]


def test_each_stop_prevents_further_page_fetches(things, three_pages):
    seen, done_calls = [], []

    def on_thing(thing, stop):
        seen.append(thing)
        if thing == "a":
            stop()

    things.each(on_thing, page_size=2, done=done_calls.append)

    assert seen == ["a"]
    assert done_calls == [None]
    assert three_pages.urls() == [f"{BASE}?PageSize=2"]


def test_each_with_limit(things, three_pages):
    seen, done_calls = [], []
    things.each(lambda t, stop: seen.append(t), limit=3, page_size=2, done=done_calls.append)
    assert seen == ["a", "b", "c"]
    assert done_calls == [None]


def test_each_page_error_goes_to_done_once(things, fake_http):
    fake_http.add("GET", f"{BASE}?PageSize=2", _page(["a", "b"], f"{BASE}?PageSize=2&Page=1"))
    fake_http.add("GET", f"{BASE}?PageSize=2&Page=1", {"message": "Internal", "code": 20500}, status_code=500)
    seen, done_calls = [], []

    things.each(lambda t, stop: seen.append(t), page_size=2, done=done_calls.append)

    # already delivered records stay delivered
    assert seen == ["a", "b"]
    assert len(done_calls) == 1
    assert isinstance(done_calls[0], TwilioRestException)
    assert done_calls[0].status == 500


def test_each_without_done_raises(things, fake_http):
    fake_http.add("GET", f"{BASE}?PageSize=2", {"message": "nope"}, status_code=403)

    with pytest.raises(TwilioRestException):
        things.each(lambda t, stop: None, page_size=2)


def test_each_transport_error_reaches_done(things, monkeypatch):
    boom = requests.ConnectionError("reset")

    def fail(*args, **kwargs):
        raise boom

    monkeypatch.setattr(things._version.domain.twilio.http_client, "request", fail)
    done_calls = []

    things.each(lambda t, stop: None, done=done_calls.append)

    assert done_calls == [boom]


def test_each_requires_callback(things):
    with pytest.raises(TypeError):
        things.each(None)


def test_stop_called_twice_completes_once(things, three_pages):
    done_calls = []

    def on_thing(thing, stop):
        stop()
        stop()

    things.each(on_thing, page_size=2, done=done_calls.append)
    assert done_calls == [None]


def test_each_callback_error_goes_to_done(things, three_pages):
    done_calls = []

    def on_thing(thing, stop):
        if thing == "c":
            raise RuntimeError("bad record")

    things.each(on_thing, page_size=2, done=done_calls.append)

    assert len(done_calls) == 1
    assert str(done_calls[0]) == "bad record"
    assert three_pages.urls() == [f"{BASE}?PageSize=2", f"{BASE}?PageSize=2&Page=1"]


def test_each_callback_error_after_stop_goes_to_done(things, three_pages):
    done_calls = []

    def on_thing(thing, stop):
        stop()
        raise RuntimeError("after stop")

    things.each(on_thing, page_size=2, done=done_calls.append)

    assert len(done_calls) == 1
    assert isinstance(done_calls[0], RuntimeError)
    assert str(done_calls[0]) == "after stop"


def test_each_callback_error_without_done_raises(things, three_pages):
    def on_thing(thing, stop):
        raise RuntimeError("bad record")

    with pytest.raises(RuntimeError):
        things.each(on_thing, page_size=2)
