from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


# ──────────────────────────────────────────────────────────────────────────────
# EXCEPTIONS
# ──────────────────────────────────────────────────────────────────────────────
class DictionaryLoadError(ValueError):
    """Raised when a line of the accent resource cannot be parsed."""
    def __init__(self, line_number: Optional[int], line: Optional[str], reason: str):
        if line_number is None:
            message = reason
        else:
            message = f"Malformed accent resource line {line_number} {line!r}: {reason}"
        super().__init__(message)
        self.line_number = line_number
        self.line = line
        self.reason = reason


class AccentIndexError(DictionaryLoadError):
    """Raised when an accent index does not fit the mora count of its reading."""
    def __init__(self, index: int, mora_count: int,
                 line_number: Optional[int] = None, line: Optional[str] = None):
        super().__init__(
            line_number,
            line,
            f"accent index {index} is out of range for a reading of {mora_count} morae",
        )
        self.index = index
        self.mora_count = mora_count


# ──────────────────────────────────────────────────────────────────────────────
# ACCENT TYPES
# ──────────────────────────────────────────────────────────────────────────────
class Edge(Enum):
    """Border side of a mora box. Declaration order is rendering order."""
    TOP = "TOP"
    BOTTOM = "BOTTOM"
    LEFT = "LEFT"


@dataclass(frozen=True)
class Heiban:
    """Low first mora, high afterwards, particle stays high."""


@dataclass(frozen=True)
class Atamadaka:
    """High first mora, low afterwards."""


@dataclass(frozen=True)
class Odaka:
    """High through the last mora, drops onto the particle."""


@dataclass(frozen=True)
class Nakadaka:
    """Rises after the first mora and drops at *drop_index* (0-based)."""
    drop_index: int


AccentType = Union[Heiban, Atamadaka, Odaka, Nakadaka]


@dataclass(frozen=True)
class AccentEntry:
    accent_type: AccentType
    note: Optional[str] = None  # e.g. part-of-speech marker such as 名 or 副


@dataclass(frozen=True)
class WordAccents:
    """One dictionary row: a kana reading and its accent patterns in source order."""
    reading: str
    entries: Tuple[AccentEntry, ...]
