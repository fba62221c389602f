"""
Response Compression Middleware.

Gzips responses whose content type is compressible.
"""

import gzip
from typing import Callable, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from ..classifier import is_compressible
from ..config import get_settings
from ..logging import middleware_logger as logger


def accepts_gzip(accept_encoding: str) -> bool:
    """
    Check an Accept-Encoding header for gzip with a non-zero q-value.

    An explicit gzip entry wins over a "*" wildcard. Entries with an
    unreadable q-value are ignored.
    """
    weights: dict[str, float] = {}
    for item in accept_encoding.split(","):
        coding, *params = (part.strip() for part in item.split(";"))
        coding = coding.lower()
        if not coding:
            continue
        q = 1.0
        for param in params:
            name, _, value = param.partition("=")
            if name.strip().lower() == "q":
                try:
                    q = float(value.strip())
                except ValueError:
                    q = -1.0
        if q < 0 or q > 1:
            continue
        weights[coding] = q

    if "gzip" in weights:
        return weights["gzip"] > 0
    return weights.get("*", 0) > 0


class CompressionMiddleware(BaseHTTPMiddleware):
    """
    Middleware to compress responses using gzip.

    Compresses responses when:
    - Client accepts gzip encoding
    - Response is not already encoded
    - Response content type is compressible
    - Response size is above threshold
    - Compressed body is smaller than the original

    Configuration (defaults come from settings):
    - minimum_size: Only compress responses at least this large
    - compresslevel: gzip level, 1-9
    """

    def __init__(
        self,
        app,
        minimum_size: Optional[int] = None,
        compresslevel: Optional[int] = None,
    ):
        super().__init__(app)
        settings = get_settings()
        self.minimum_size = settings.minimum_size if minimum_size is None else minimum_size
        self.compresslevel = settings.compresslevel if compresslevel is None else compresslevel

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        accept_encoding = request.headers.get("accept-encoding", "")

        if not accepts_gzip(accept_encoding):
            return await call_next(request)

        response = await call_next(request)

        if "content-encoding" in response.headers:
            return response

        content_type = response.headers.get("content-type", "")
        if not is_compressible(content_type):
            return response

        body = b""
        async for chunk in response.body_iterator:
            body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")

        if len(body) < self.minimum_size:
            return self._rebuild(response, body)

        compressed_body = gzip.compress(body, compresslevel=self.compresslevel)

        # Only use compressed version if it's smaller
        if len(compressed_body) >= len(body):
            return self._rebuild(response, body)

        logger.debug(
            "response_compressed",
            content_type=content_type,
            original_size=len(body),
            compressed_size=len(compressed_body),
        )

        headers = dict(response.headers)
        headers["content-encoding"] = "gzip"
        headers["content-length"] = str(len(compressed_body))

        if "vary" in headers:
            vary = headers["vary"]
            if "accept-encoding" not in vary.lower():
                headers["vary"] = f"{vary}, Accept-Encoding"
        else:
            headers["vary"] = "Accept-Encoding"

        return Response(
            content=compressed_body,
            status_code=response.status_code,
            headers=headers,
        )

    @staticmethod
    def _rebuild(response: Response, body: bytes) -> Response:
        """Return the already-consumed body unchanged."""
        return Response(
            content=body,
            status_code=response.status_code,
            headers=dict(response.headers),
        )
