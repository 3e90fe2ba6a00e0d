from __future__ import annotations

from enum import Enum

from transitnet.domain.exceptions import InvalidNameError

RECORD_DELIMITERS = (",", ":", "|")


class TransportType(str, Enum):
    BUS = "bus"
    TRAIN = "train"
    FERRY = "ferry"


def strip_line_breaks(value: str | None) -> str:
    """Return ``value`` without carriage returns or newlines (``None`` -> "")."""
    if value is None:
        return ""
    return value.replace("\r", "").replace("\n", "")


def reject_delimiters(value: str, what: str) -> str:
    """Return ``value`` unchanged, or raise InvalidNameError if it holds a delimiter."""
    found = [d for d in RECORD_DELIMITERS if d in value]
    if found:
        raise InvalidNameError(f"{what} {value!r} contains {' '.join(found)}")
    return value
