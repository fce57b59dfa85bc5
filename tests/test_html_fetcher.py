import httpx
import pytest

from baking_assistant.app.services.url_parsing import html_fetcher
from baking_assistant.app.services.url_parsing.errors import FetchError


def _fake_client(handler):
    class FakeAsyncClient:
        def __init__(self, *args, **kwargs):
            self.headers = kwargs.get("headers") or {}

        async def __aenter__(self):
            return self

        async def __aexit__(self, exc_type, exc, tb):
            return False

        async def get(self, url, *args, **kwargs):
            return handler(url, self.headers)

    return FakeAsyncClient


@pytest.mark.asyncio
async def test_fetch_html_returns_text(monkeypatch):
    seen = {}

    def handler(url, headers):
        seen["url"] = url
        seen["user_agent"] = headers.get("User-Agent")
        return httpx.Response(
            200,
            text="<html><body>ok</body></html>",
            headers={"content-type": "text/html; charset=utf-8"},
            request=httpx.Request("GET", url),
        )

    monkeypatch.setattr(html_fetcher.httpx, "AsyncClient", _fake_client(handler))

    text = await html_fetcher.fetch_html("https://example.com/recipe")
    assert text == "<html><body>ok</body></html>"
    assert seen["url"] == "https://example.com/recipe"
    assert seen["user_agent"]


@pytest.mark.asyncio
async def test_fetch_html_non_2xx_raises(monkeypatch):
    def handler(url, headers):
        return httpx.Response(404, text="missing", request=httpx.Request("GET", url))

    monkeypatch.setattr(html_fetcher.httpx, "AsyncClient", _fake_client(handler))

    with pytest.raises(FetchError, match="404"):
        await html_fetcher.fetch_html("https://example.com/missing")


@pytest.mark.asyncio
async def test_fetch_html_network_error_raises(monkeypatch):
    calls = []

    def handler(url, headers):
        calls.append(url)
        raise httpx.ConnectError("connection refused", request=httpx.Request("GET", url))

    monkeypatch.setattr(html_fetcher.httpx, "AsyncClient", _fake_client(handler))

    with pytest.raises(FetchError, match="Network error"):
        await html_fetcher.fetch_html("https://example.com/down")
    assert calls == ["https://example.com/down"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "url",
    [
        "ftp://example.com/file",
        "not a url",
        "http://localhost:3000/recipe",
        "http://localhost./recipe",
        "http://10.0.0.5/",
        "http://[::1]/",
        "http://[::1]:8000/recipe",
    ],
)
async def test_fetch_html_rejects_bad_urls(url):
    with pytest.raises(FetchError):
        await html_fetcher.fetch_html(url)


def test_is_private_host():
    assert html_fetcher.is_private_host("127.0.0.1")
    assert html_fetcher.is_private_host("localhost:8000")
    assert html_fetcher.is_private_host("192.168.1.10")
    assert html_fetcher.is_private_host("::1")
    assert html_fetcher.is_private_host("[::1]:8000")
    assert not html_fetcher.is_private_host("example.com")
    assert not html_fetcher.is_private_host("8.8.8.8")
