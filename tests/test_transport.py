import pytest
import requests

from aur_news import transport
from aur_news.errors import AurError, RequestError, ResponseError


def test_request_text_returns_body(fake_session):
    session = fake_session(body="hello")

    assert transport.request_text("https://example.com", session=session) == "hello"
    assert session.calls == [("https://example.com", transport.DEFAULT_TIMEOUT)]


def test_request_bytes_passes_timeout(fake_session):
    session = fake_session(body=b"\x00\x01")

    body = transport.request_bytes("https://example.com", session=session, timeout=3.0)

    assert body == b"\x00\x01"
    assert session.calls[0][1] == 3.0


def test_non_success_status_raises_response_error(fake_session):
    session = fake_session(status_code=404)

    with pytest.raises(ResponseError) as excinfo:
        transport.request_text("https://example.com/missing", session=session)

    assert excinfo.value.status_code == 404
    assert excinfo.value.url == "https://example.com/missing"
    assert str(excinfo.value) == "https://example.com/missing: 404"


def test_transport_failure_raises_request_error(fake_session):
    session = fake_session(error=requests.ConnectionError("refused"))

    with pytest.raises(RequestError) as excinfo:
        transport.request_bytes("https://example.com", session=session)

    assert isinstance(excinfo.value, AurError)
    assert isinstance(excinfo.value.cause, requests.ConnectionError)


def test_module_level_requests_used_without_session(monkeypatch, fake_session):
    session = fake_session(body="via module")
    monkeypatch.setattr(transport.requests, "get", session.get)

    assert transport.request_text("https://example.com") == "via module"
