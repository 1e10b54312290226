"""Tests for HttpFetcher."""

import httpx
import pytest

from httpdesc.core import HttpFetcher, HTTPResponseDescriptor


@pytest.fixture
async def fetcher():
    fetcher = HttpFetcher(timeout=10.0)
    yield fetcher
    await fetcher.close()


class TestHttpFetcher:
    async def test_fetch_describes_response(self, fetcher, httpx_mock):
        """Fetched response is turned into a descriptor."""
        httpx_mock.add_response(
            url="https://example.com/x",
            status_code=200,
            headers={"Content-Type": "text/html"},
            text="<html></html>",
        )
        response = await fetcher.fetch("https://example.com/x")

        assert isinstance(response, HTTPResponseDescriptor)
        assert response.url == "https://example.com/x"
        assert response.status_code == 200
        assert response.http_version == "HTTP/1.1"
        assert response.header("content-type") == "text/html"

    async def test_fetch_keeps_error_status(self, fetcher, httpx_mock):
        """4xx responses are described, not raised."""
        httpx_mock.add_response(url="https://example.com/missing", status_code=404)
        response = await fetcher.fetch("https://example.com/missing")
        assert response.status_code == 404

    async def test_fetch_reports_http_version(self, fetcher, httpx_mock):
        """Protocol version comes from the transport."""
        httpx_mock.add_response(url="https://example.com/", http_version="HTTP/2.0")
        response = await fetcher.fetch("https://example.com/")
        assert response.http_version == "HTTP/2.0"

    async def test_fetch_follows_redirects(self, fetcher, httpx_mock):
        """The descriptor describes the final response."""
        httpx_mock.add_response(
            url="http://example.com/old",
            status_code=301,
            headers={"Location": "https://example.com/new"},
        )
        httpx_mock.add_response(url="https://example.com/new", status_code=200)
        response = await fetcher.fetch("http://example.com/old")
        assert response.url == "https://example.com/new"
        assert response.status_code == 200

    async def test_fetch_head_method(self, fetcher, httpx_mock):
        """The method is passed through to httpx."""
        httpx_mock.add_response(method="HEAD", url="https://example.com/", status_code=204)
        response = await fetcher.fetch("https://example.com/", method="HEAD")
        assert response.status_code == 204

    async def test_fetch_sends_user_agent(self, httpx_mock):
        """Configured user agent is sent with each request."""
        httpx_mock.add_response(
            url="https://example.com/", match_headers={"User-Agent": "test-agent/1.0"}
        )
        fetcher = HttpFetcher(user_agent="test-agent/1.0")
        try:
            response = await fetcher.fetch("https://example.com/")
            assert response.status_code == 200
        finally:
            await fetcher.close()

    async def test_transport_errors_propagate(self, fetcher, httpx_mock):
        """httpx exceptions are not wrapped."""
        httpx_mock.add_exception(httpx.ConnectError("refused"))
        with pytest.raises(httpx.ConnectError):
            await fetcher.fetch("https://example.com/")

    async def test_client_reused(self, fetcher, httpx_mock):
        """The same client is used across fetches."""
        httpx_mock.add_response(url="https://example.com/a")
        httpx_mock.add_response(url="https://example.com/b")
        await fetcher.fetch("https://example.com/a")
        client = fetcher._client
        await fetcher.fetch("https://example.com/b")
        assert fetcher._client is client

    async def test_close_resets_client(self, fetcher, httpx_mock):
        """close() releases the client."""
        httpx_mock.add_response(url="https://example.com/")
        await fetcher.fetch("https://example.com/")
        await fetcher.close()
        assert fetcher._client is None
