"""
compressible.

Checks whether a media type is worth compressing with algorithms like
brotli, gzip or deflate, using the compressible flags published by mime-db.

Usage:
    from compressible import is_compressible

    is_compressible("text/plain")                           # True
    is_compressible("application/json; charset=utf-8")      # True
    is_compressible("image/jpeg")                           # False
    is_compressible("not a media type")                     # False

    # ASGI middleware
    from compressible.middleware import CompressionMiddleware

    # Config / logging
    from compressible.config import get_settings
    from compressible.logging import get_logger
"""

__version__ = "1.0.0"

from .classifier import Classification, classify, is_compressible, lookup
from .enums import ClassificationReason
from .parsing import ParsedMediaType, parse_media_type
from .table import (
    DuplicateMediaTypeError,
    ReferenceTable,
    ReferenceTableError,
    get_reference_table,
)

__all__ = [
    "is_compressible",
    "classify",
    "lookup",
    "Classification",
    "ClassificationReason",
    "ParsedMediaType",
    "parse_media_type",
    "ReferenceTable",
    "ReferenceTableError",
    "DuplicateMediaTypeError",
    "get_reference_table",
]
