"""
Reference table.

Read-only mapping from a media type essence (``type/subtype``) to whether
content of that type is worth compressing. Built once from
compressible.constants and validated on construction.
"""

import threading
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Optional

from .constants import COMPRESSIBLE_MEDIA_TYPES
from .logging import table_logger as logger
from .parsing import is_restricted_name


class ReferenceTableError(Exception):
    """Raised when reference data fails validation."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        message = "Reference table errors:\n" + "\n".join(f"  - {e}" for e in errors)
        super().__init__(message)


class DuplicateMediaTypeError(ReferenceTableError):
    """Raised when the same essence appears more than once."""


@dataclass
class ValidationResult:
    """Result of reference data validation."""

    valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    duplicates: list[str] = field(default_factory=list)


def _is_essence(key: str) -> bool:
    main_type, slash, subtype = key.partition("/")
    return bool(slash) and is_restricted_name(main_type) and is_restricted_name(subtype)


def validate_entries(entries: Iterable[tuple[str, bool]]) -> ValidationResult:
    """
    Validate (essence, compressible) pairs.

    Errors:
    - the same essence listed twice
    - a key that is not a ``type/subtype`` essence
    - a value that is not a bool

    Warnings:
    - a key with uppercase characters (lookups are lowercased, so it can
      never match)
    """
    errors: list[str] = []
    warnings: list[str] = []
    duplicates: list[str] = []
    seen: dict[str, bool] = {}

    for essence, compressible in entries:
        if not isinstance(essence, str) or not _is_essence(essence):
            errors.append(f"'{essence}' is not a type/subtype essence")
            continue
        if not isinstance(compressible, bool):
            errors.append(f"'{essence}' has non-boolean value {compressible!r}")
            continue
        if essence in seen:
            duplicates.append(essence)
            if seen[essence] != compressible:
                errors.append(f"'{essence}' listed twice with conflicting values")
            else:
                errors.append(f"'{essence}' listed twice")
            continue
        if essence != essence.lower():
            warnings.append(f"'{essence}' is not lowercase and will never match")
        seen[essence] = compressible

    return ValidationResult(
        valid=not errors,
        errors=errors,
        warnings=warnings,
        duplicates=duplicates,
    )


class ReferenceTable(Mapping[str, bool]):
    """
    Immutable essence -> compressible mapping.

    Usage:
        table = ReferenceTable.from_entries([("text/plain", True)])
        table.lookup("text/plain")   # True
        table.lookup("image/jpeg")   # None
    """

    def __init__(self, mapping: Mapping[str, bool]):
        self._data = MappingProxyType(dict(mapping))

    @classmethod
    def from_entries(cls, entries: Iterable[tuple[str, bool]]) -> "ReferenceTable":
        """Validate entries and build a table. Raises ReferenceTableError on bad data."""
        entries = tuple(entries)
        result = validate_entries(entries)

        for warning in result.warnings:
            logger.warning("reference_table_warning", detail=warning)

        if result.duplicates:
            raise DuplicateMediaTypeError(result.errors)
        if not result.valid:
            raise ReferenceTableError(result.errors)

        return cls(dict(entries))

    def lookup(self, essence: str) -> Optional[bool]:
        """Stored classification for an exact essence, or None when absent."""
        return self._data.get(essence)

    def essences(self, prefix: Optional[str] = None) -> list[str]:
        """Sorted table keys, optionally only those starting with ``prefix``."""
        if prefix is None:
            return sorted(self._data)
        return sorted(key for key in self._data if key.startswith(prefix))

    def __getitem__(self, essence: str) -> bool:
        return self._data[essence]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._data)} entries)"


# =============================================================================
# Process-wide Table
# =============================================================================

_table: Optional[ReferenceTable] = None
_table_lock = threading.Lock()


def get_reference_table() -> ReferenceTable:
    """Get the shared reference table, building it on first use."""
    global _table
    if _table is None:
        with _table_lock:
            if _table is None:
                table = ReferenceTable.from_entries(COMPRESSIBLE_MEDIA_TYPES)
                logger.debug("reference_table_built", entries=len(table))
                _table = table
    return _table


__all__ = [
    "ReferenceTable",
    "ReferenceTableError",
    "DuplicateMediaTypeError",
    "ValidationResult",
    "validate_entries",
    "get_reference_table",
]
