# Media type parsing module

from .media_type import (
    ParsedMediaType,
    is_media_type,
    is_restricted_name,
    parse_media_type,
)

__all__ = [
    "ParsedMediaType",
    "parse_media_type",
    "is_media_type",
    "is_restricted_name",
]
