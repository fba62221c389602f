"""
Media type parsing.

Thin adapter over python-mimeparse. The raw value is first checked against
the media type grammar (RFC 6838 names, RFC 9110 parameters); the library
then splits out the type, subtype and parameters, and this module lowercases
the type and subtype. Library exceptions and grammar failures both become a
plain ``None`` result.
"""

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Union

from mimeparse import MimeTypeParseException, parse_mime_type

# restricted-name = restricted-name-first *126restricted-name-chars
RESTRICTED_NAME = r"[A-Za-z0-9][A-Za-z0-9!#$&^_.+-]{0,126}"
RESTRICTED_NAME_PATTERN = re.compile(RESTRICTED_NAME)

TOKEN = r"[!#$%&'*+.^_`|~0-9A-Za-z-]+"
QUOTED_STRING = r'"(?:[\t \x21\x23-\x5b\x5d-\x7e\x80-\xff]|\\[\t \x21-\x7e\x80-\xff])*"'
PARAMETER = rf"[ \t]*;[ \t]*{TOKEN}=(?:{TOKEN}|{QUOTED_STRING})"

# type "/" subtype *( OWS ";" OWS parameter ), no surrounding whitespace
MEDIA_TYPE_PATTERN = re.compile(rf"{RESTRICTED_NAME}/{RESTRICTED_NAME}(?:{PARAMETER})*")


@dataclass(frozen=True)
class ParsedMediaType:
    """A successfully parsed media type."""

    type: str
    subtype: str
    parameters: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def essence(self) -> str:
        """The ``type/subtype`` pair without parameters."""
        return f"{self.type}/{self.subtype}"

    @property
    def suffix(self) -> Optional[str]:
        """Structured syntax suffix (``json`` in ``application/ld+json``)."""
        _, plus, suffix = self.subtype.rpartition("+")
        return suffix if plus and suffix else None


def is_restricted_name(value: str) -> bool:
    """Check a type or subtype name against RFC 6838 restricted-name."""
    return RESTRICTED_NAME_PATTERN.fullmatch(value) is not None


def is_media_type(value: str) -> bool:
    """Check a raw string against the media type grammar."""
    return MEDIA_TYPE_PATTERN.fullmatch(value) is not None


def parse_media_type(value: Union[str, bytes]) -> Optional[ParsedMediaType]:
    """
    Parse a media type string such as ``text/html; charset=utf-8``.

    Args:
        value: Raw media type, usually a Content-Type header value. Bytes are
            decoded as ASCII.

    Returns:
        ParsedMediaType on success, None if the value is not a valid media type.
    """
    if isinstance(value, bytes):
        try:
            value = value.decode("ascii")
        except UnicodeDecodeError:
            return None
    if not isinstance(value, str) or not is_media_type(value):
        return None

    try:
        main_type, subtype, params = parse_mime_type(value)
    except (MimeTypeParseException, ValueError):
        return None

    return ParsedMediaType(
        type=main_type.lower(),
        subtype=subtype.lower(),
        parameters=MappingProxyType(dict(params)),
    )
