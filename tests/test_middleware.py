"""
Tests for the response compression middleware.
"""

import pytest
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.responses import HTMLResponse, JSONResponse, Response
from starlette.routing import Route
from starlette.testclient import TestClient

from compressible.config import get_settings
from compressible.middleware import CompressionMiddleware, accepts_gzip

LARGE_TEXT = "compressible " * 200


async def json_route(request):
    return JSONResponse({"data": "x" * 1000})


async def html_route(request):
    return HTMLResponse(f"<html><body>{LARGE_TEXT}</body></html>")


async def small_route(request):
    return JSONResponse({"ok": True})


async def jpeg_route(request):
    return Response(content=b"\xff\xd8" + b"\x00" * 2000, media_type="image/jpeg")


async def encoded_route(request):
    return Response(
        content=LARGE_TEXT.encode(),
        media_type="text/plain",
        headers={"Content-Encoding": "x-custom"},
    )


async def vary_route(request):
    return Response(
        content=LARGE_TEXT.encode(),
        media_type="text/plain",
        headers={"Vary": "Origin"},
    )


async def no_type_route(request):
    return Response(content=LARGE_TEXT.encode())


def _client(**options) -> TestClient:
    app = Starlette(
        routes=[
            Route("/json", json_route),
            Route("/html", html_route),
            Route("/small", small_route),
            Route("/jpeg", jpeg_route),
            Route("/encoded", encoded_route),
            Route("/vary", vary_route),
            Route("/no-type", no_type_route),
        ],
        middleware=[Middleware(CompressionMiddleware, **options)],
    )
    return TestClient(app)


class TestCompressionMiddleware:
    """Tests for CompressionMiddleware."""

    def test_compresses_json(self):
        """Test large JSON responses are gzipped."""
        response = _client().get("/json", headers={"Accept-Encoding": "gzip"})

        assert response.status_code == 200
        assert response.headers["content-encoding"] == "gzip"
        assert response.headers["vary"] == "Accept-Encoding"
        assert response.json() == {"data": "x" * 1000}

    def test_compresses_html_with_charset(self):
        """Test parameters on the content type do not block compression."""
        response = _client().get("/html", headers={"Accept-Encoding": "gzip, br"})

        assert response.headers["content-encoding"] == "gzip"
        assert LARGE_TEXT in response.text

    def test_content_length_matches_compressed_body(self):
        """Test Content-Length is rewritten for the gzipped body."""
        client = _client()
        response = client.get("/json", headers={"Accept-Encoding": "gzip"})

        assert int(response.headers["content-length"]) < len(response.content)

    def test_no_compression_without_accept_header(self):
        """Test no compression when client doesn't accept gzip."""
        response = _client().get("/json", headers={"Accept-Encoding": "identity"})

        assert "content-encoding" not in response.headers

    def test_skips_incompressible_type(self):
        """Test image bodies are passed through."""
        response = _client().get("/jpeg", headers={"Accept-Encoding": "gzip"})

        assert "content-encoding" not in response.headers
        assert response.content.startswith(b"\xff\xd8")

    def test_skips_missing_content_type(self):
        """Test a response without a content type is not compressed."""
        response = _client().get("/no-type", headers={"Accept-Encoding": "gzip"})

        assert "content-encoding" not in response.headers

    def test_skips_small_body(self):
        """Test bodies under the minimum size are passed through."""
        response = _client().get("/small", headers={"Accept-Encoding": "gzip"})

        assert "content-encoding" not in response.headers
        assert response.json() == {"ok": True}

    def test_minimum_size_option(self):
        """Test bodies under a raised threshold are passed through."""
        response = _client(minimum_size=100_000).get("/json", headers={"Accept-Encoding": "gzip"})

        assert "content-encoding" not in response.headers

    def test_skips_when_gzip_is_larger(self):
        """Test tiny bodies stay uncompressed even with no threshold."""
        response = _client(minimum_size=0).get("/small", headers={"Accept-Encoding": "gzip"})

        assert "content-encoding" not in response.headers
        assert response.json() == {"ok": True}

    def test_skips_already_encoded(self):
        """Test responses with a Content-Encoding are left alone."""
        response = _client().get("/encoded", headers={"Accept-Encoding": "gzip"})

        assert response.headers["content-encoding"] == "x-custom"

    def test_appends_to_vary(self):
        """Test an existing Vary header is extended."""
        response = _client().get("/vary", headers={"Accept-Encoding": "gzip"})

        assert response.headers["content-encoding"] == "gzip"
        assert response.headers["vary"] == "Origin, Accept-Encoding"

    def test_defaults_from_settings(self, monkeypatch):
        """Test thresholds default to the configured settings."""
        monkeypatch.setenv("COMPRESSIBLE_MINIMUM_SIZE", "10")
        monkeypatch.setenv("COMPRESSIBLE_COMPRESSLEVEL", "9")
        get_settings.cache_clear()

        middleware = CompressionMiddleware(None)

        assert middleware.minimum_size == 10
        assert middleware.compresslevel == 9

    def test_explicit_options_win(self, monkeypatch):
        """Test constructor arguments override settings."""
        monkeypatch.setenv("COMPRESSIBLE_MINIMUM_SIZE", "10")
        get_settings.cache_clear()

        middleware = CompressionMiddleware(None, minimum_size=2048, compresslevel=1)

        assert middleware.minimum_size == 2048
        assert middleware.compresslevel == 1

    def test_refused_gzip_q_zero(self):
        """Test gzip;q=0 means the client refuses gzip."""
        response = _client().get("/json", headers={"Accept-Encoding": "gzip;q=0, identity"})

        assert "content-encoding" not in response.headers


class TestAcceptsGzip:
    """Tests for Accept-Encoding parsing."""

    @pytest.mark.parametrize(
        "header",
        ["gzip", "GZIP", "gzip, deflate, br", "br;q=1.0, gzip;q=0.5", "*", "deflate, *;q=0.1"],
    )
    def test_accepted(self, header):
        """Test headers that allow gzip."""
        assert accepts_gzip(header) is True

    @pytest.mark.parametrize(
        "header",
        ["", "identity", "br, deflate", "gzip;q=0", "gzip; q=0.000", "*, gzip;q=0", "*;q=0", "gzip;q=abc"],
    )
    def test_refused(self, header):
        """Test headers that do not allow gzip."""
        assert accepts_gzip(header) is False
