import pytest

from twilio_lite.base import values
from twilio_lite.base.domain import Domain
from twilio_lite.base.exceptions import TwilioRestException
from twilio_lite.base.version import MAX_PAGE_SIZE, Version


@pytest.fixture()
def version(client):
    return Version(Domain(client, "https://trunking.twilio.com/"), "v1")


def test_absolute_url_trims_slashes(client):
    d = Domain(client, "https://trunking.twilio.com/")
    assert d.absolute_url("/v1/Trunks/") == "https://trunking.twilio.com/v1/Trunks"
    assert d.absolute_url("v1/Trunks") == "https://trunking.twilio.com/v1/Trunks"


def test_version_urls(version):
    assert version.relative_uri("/Trunks") == "v1/Trunks"
    assert version.absolute_url("/Trunks/TK1") == "https://trunking.twilio.com/v1/Trunks/TK1"


def test_fetch_returns_payload(version, fake_http):
    fake_http.add("GET", "https://trunking.twilio.com/v1/Trunks/TK1", {"sid": "TK1"})

    assert version.fetch(method="GET", uri="/Trunks/TK1") == {"sid": "TK1"}


def test_error_answer_raises_rest_exception(version, fake_http):
    fake_http.add(
        "POST",
        "https://trunking.twilio.com/v1/Trunks",
        {"code": 21212, "message": "Invalid domain", "more_info": "https://www.twilio.com/docs/errors/21212", "status": 400},
        status_code=400,
    )

    with pytest.raises(TwilioRestException) as e:
        version.create(method="POST", uri="/Trunks", data={"DomainName": "x"})

    err = e.value
    assert err.status == 400
    assert err.code == 21212
    assert err.msg == "Invalid domain"
    assert err.method == "POST"
    assert err.uri == "/Trunks"
    assert err.more_info.endswith("21212")
    assert str(err).startswith("Twilio API error 400: Invalid domain")


def test_error_answer_without_json_body(version, fake_http):
    fake_http.add("GET", "https://trunking.twilio.com/v1/Trunks/TK1", status_code=502, text="<html>bad gateway</html>")

    with pytest.raises(TwilioRestException) as e:
        version.fetch(method="GET", uri="/Trunks/TK1")

    assert e.value.status == 502
    assert e.value.code is None
    assert "Unable to fetch record" in e.value.msg
    assert "bad gateway" in e.value.msg


def test_redirect_answer_raises_rest_exception(version, fake_http):
    fake_http.add(
        "GET",
        "https://trunking.twilio.com/v1/Trunks/TK1",
        status_code=301,
        text="<html>moved</html>",
    )

    with pytest.raises(TwilioRestException) as e:
        version.fetch(method="GET", uri="/Trunks/TK1")

    assert e.value.status == 301
    assert "moved" in e.value.msg


def test_delete_true_on_204(version, fake_http):
    fake_http.add("DELETE", "https://trunking.twilio.com/v1/Trunks/TK1", status_code=204)
    assert version.delete(method="DELETE", uri="/Trunks/TK1") is True


def test_delete_raises_on_404(version, fake_http):
    fake_http.add("DELETE", "https://trunking.twilio.com/v1/Trunks/TK1", {"message": "gone"}, status_code=404)
    with pytest.raises(TwilioRestException):
        version.delete(method="DELETE", uri="/Trunks/TK1")


def test_read_limits_page_size_follows_limit(version):
    assert version.read_limits(limit=5) == {"limit": 5, "page_size": 5, "page_limit": 1}


def test_read_limits_caps_page_size(version):
    limits = version.read_limits(limit=2500)
    assert limits["page_size"] == MAX_PAGE_SIZE
    assert limits["page_limit"] == 3


def test_read_limits_explicit_page_size(version):
    assert version.read_limits(limit=5, page_size=2) == {"limit": 5, "page_size": 2, "page_limit": 3}


def test_read_limits_without_limit(version):
    limits = version.read_limits()
    assert limits["limit"] is None
    assert limits["page_size"] is values.unset
    assert limits["page_limit"] is None

    assert version.read_limits(page_size=20)["page_size"] == 20


@pytest.mark.parametrize("kwargs", [{"limit": 0}, {"limit": -1}, {"limit": 1.5}, {"page_size": 0}, {"page_size": "10"}])
def test_read_limits_rejects_bad_values(version, kwargs):
    with pytest.raises(ValueError):
        version.read_limits(**kwargs)


class FakePage:
    """Iterable page whose next_page() counts fetches."""

    def __init__(self, pages, index, fetched):
        self._pages = pages
        self._index = index
        self._fetched = fetched

    def __iter__(self):
        return iter(self._pages[self._index])

    def next_page(self):
        if self._index + 1 >= len(self._pages):
            return None
        self._fetched.append(self._index + 1)
        return FakePage(self._pages, self._index + 1, self._fetched)


def _first_page(pages):
    fetched = []
    return FakePage(pages, 0, fetched), fetched


def test_stream_follows_pages_until_exhausted(version):
    page, fetched = _first_page([[1, 2], [3, 4], [5]])
    assert list(version.stream(page)) == [1, 2, 3, 4, 5]
    assert fetched == [1, 2]


def test_stream_never_exceeds_limit(version):
    page, fetched = _first_page([[1, 2, 3], [4, 5, 6], [7]])
    assert list(version.stream(page, limit=4, page_limit=None)) == [1, 2, 3, 4]
    assert fetched == [1]


def test_stream_limit_reached_at_page_boundary_fetches_nothing_more(version):
    page, fetched = _first_page([[1, 2], [3, 4]])
    assert list(version.stream(page, limit=2, page_limit=1)) == [1, 2]
    assert fetched == []


def test_stream_respects_page_limit(version):
    page, fetched = _first_page([[1], [2], [3], [4]])
    assert list(version.stream(page, limit=None, page_limit=2)) == [1, 2]
    assert fetched == [1]


def test_stream_is_lazy(version):
    page, fetched = _first_page([[1, 2], [3]])
    it = version.stream(page)
    assert next(it) == 1
    assert next(it) == 2
    assert fetched == []
    assert next(it) == 3
    assert fetched == [1]
