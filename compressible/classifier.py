"""
Compressibility classifier.

Usage:
    from compressible import is_compressible

    is_compressible("text/html; charset=utf-8")  # True
    is_compressible("image/jpeg")                # False
"""

from dataclasses import dataclass
from typing import Optional, Union

from .enums import ClassificationReason
from .logging import classifier_logger as logger
from .parsing import parse_media_type
from .table import get_reference_table


@dataclass(frozen=True)
class Classification:
    """Outcome of classifying one media type."""

    content_type: Union[str, bytes]
    essence: Optional[str]
    compressible: bool
    reason: ClassificationReason


def lookup(essence: str) -> Optional[bool]:
    """Look up an exact essence in the reference table. None when absent."""
    return get_reference_table().lookup(essence)


def classify(content_type: Union[str, bytes]) -> Classification:
    """
    Classify a media type and explain the decision.

    Unparseable and unlisted media types are both reported as not
    compressible.
    """
    parsed = parse_media_type(content_type)
    if parsed is None:
        logger.debug("media_type_unparseable", content_type=repr(content_type)[:200])
        return Classification(
            content_type=content_type,
            essence=None,
            compressible=False,
            reason=ClassificationReason.UNPARSEABLE,
        )

    stored = lookup(parsed.essence)
    if stored is None:
        logger.debug("media_type_unlisted", essence=parsed.essence)
        return Classification(
            content_type=content_type,
            essence=parsed.essence,
            compressible=False,
            reason=ClassificationReason.UNLISTED,
        )

    return Classification(
        content_type=content_type,
        essence=parsed.essence,
        compressible=stored,
        reason=ClassificationReason.LISTED,
    )


def is_compressible(content_type: Union[str, bytes]) -> bool:
    """
    Returns whether the content type is compressible with algorithms like
    brotli, gzip or deflate.

    Parameters are ignored and matching is case-insensitive. Returns False for
    anything that does not parse as a media type or is not in the reference
    table; never raises.
    """
    parsed = parse_media_type(content_type)
    if parsed is None:
        return False
    stored = lookup(parsed.essence)
    return stored if stored is not None else False


__all__ = ["Classification", "classify", "is_compressible", "lookup"]
