import pytest

responses = pytest.importorskip("responses")
requests = pytest.importorskip("requests")

from tinydesk.errors import FetchError
from tinydesk.fetch import fetch_page

URL = "https://www.npr.org/2024/03/15/1230001/jane-doe-tiny-desk-concert"


@responses.activate
def test_fetch_page_returns_body():
    responses.add(responses.GET, URL, body="<html>ok</html>", status=200)
    assert fetch_page(URL) == "<html>ok</html>"
    assert len(responses.calls) == 1


@responses.activate
def test_fetch_page_tolerates_error_status_by_default():
    messages = []
    responses.add(responses.GET, URL, body="<html>not found</html>", status=404)

    assert fetch_page(URL, log_func=messages.append) == "<html>not found</html>"
    assert any("HTTP 404" in m for m in messages)


@responses.activate
def test_fetch_page_strict_rejects_error_status():
    responses.add(responses.GET, URL, body="gone", status=500)
    with pytest.raises(FetchError, match="HTTP 500"):
        fetch_page(URL, strict=True)


@responses.activate
def test_fetch_page_strict_from_config(monkeypatch):
    monkeypatch.setattr("tinydesk.config.STRICT_STATUS", True)
    responses.add(responses.GET, URL, body="gone", status=404)
    with pytest.raises(FetchError):
        fetch_page(URL)


@responses.activate
def test_fetch_page_wraps_transport_errors():
    responses.add(responses.GET, URL, body=requests.exceptions.ConnectionError("refused"))
    with pytest.raises(FetchError, match="Failed to send request") as excinfo:
        fetch_page(URL)
    assert isinstance(excinfo.value.__cause__, requests.exceptions.ConnectionError)


@responses.activate
def test_fetch_page_decodes_declared_charset():
    responses.add(
        responses.GET,
        URL,
        body="<title>Beyoncé</title>".encode("utf-8"),
        content_type="text/html; charset=utf-8",
    )
    assert fetch_page(URL) == "<title>Beyoncé</title>"


@responses.activate
def test_fetch_page_rejects_undecodable_body():
    responses.add(responses.GET, URL, body=b"\xff\xfe<html>\xc3", content_type="text/html; charset=utf-8")
    with pytest.raises(FetchError, match="Failed to get response text") as excinfo:
        fetch_page(URL)
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


@responses.activate
def test_fetch_page_rejects_unknown_charset():
    responses.add(responses.GET, URL, body=b"<html></html>", content_type="text/html; charset=no-such-codec")
    with pytest.raises(FetchError, match="Failed to get response text") as excinfo:
        fetch_page(URL)
    assert isinstance(excinfo.value.__cause__, LookupError)
