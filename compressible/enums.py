"""
Enumerations.

String enums, so values serialize cleanly in logs and CLI JSON output.
"""

from enum import Enum


class ClassificationReason(str, Enum):
    """Why a media type was classified the way it was."""

    LISTED = "listed"  # essence found in the reference table
    UNLISTED = "unlisted"  # valid media type, not in the table
    UNPARSEABLE = "unparseable"  # not a valid media type


__all__ = ["ClassificationReason"]
