"""
ASGI Middleware.

Provides response compression driven by the reference table.
"""

from .compression import CompressionMiddleware, accepts_gzip

__all__ = ["CompressionMiddleware", "accepts_gzip"]
