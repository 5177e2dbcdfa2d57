"""Accent dictionary built from the kanjium-style ``accents.txt`` resource.

Each line holds three tab-separated fields::

    word <TAB> reading <TAB> code[,code]*

``reading`` may be empty, in which case the word itself is the reading. A code
is a non-negative accent index, optionally combined with a parenthesised
annotation such as ``(名)0`` or ``1(副)``.
"""

import re
from types import MappingProxyType
from collections.abc import Mapping
from typing import Dict, Iterator, List, Optional, Tuple

from mochi_pitch import ACCENTS_PATH
from mochi_pitch.logger import logger
from .base import (
    AccentEntry,
    AccentIndexError,
    AccentType,
    Atamadaka,
    DictionaryLoadError,
    Heiban,
    Nakadaka,
    Odaka,
    WordAccents,
)
from .morae import mora_count

_NOTE_RE = re.compile(r"\(([^)\d]+)\)")
_INDEX_RE = re.compile(r"\d+")


def parse_code(code: str) -> Tuple[Optional[str], int]:
    """Return ``(note, index)`` for a single accent code.

    The note is the first parenthesised run of non-digits, the index the
    first run of digits. Raises ``ValueError`` when there is no index.
    """
    note_match = _NOTE_RE.search(code)
    note = note_match.group(1) if note_match else None
    index_match = _INDEX_RE.search(code)
    if not index_match:
        raise ValueError(f"no accent index in code {code!r}")
    return note, int(index_match.group(0))


def classify(index: int, morae: int) -> AccentType:
    """Map a raw accent index onto its pattern for a reading of *morae* morae."""
    if index == 0:
        return Heiban()
    if index == 1:
        return Atamadaka()
    if index == morae:
        return Odaka()
    if 1 < index < morae:
        return Nakadaka(index)
    raise AccentIndexError(index, morae)


def parse_line(line: str, line_number: int) -> Tuple[str, WordAccents]:
    """Parse one resource line into ``(word, WordAccents)``."""
    fields = line.split("\t")
    if len(fields) != 3:
        raise DictionaryLoadError(
            line_number, line, f"expected 3 tab-separated fields, got {len(fields)}"
        )
    word, reading, codes = (field.strip() for field in fields)
    if not word:
        raise DictionaryLoadError(line_number, line, "empty word field")
    reading = reading or word
    morae = mora_count(reading)

    entries: List[AccentEntry] = []
    for code in codes.split(","):
        try:
            note, index = parse_code(code)
            entries.append(AccentEntry(classify(index, morae), note))
        except AccentIndexError as e:
            raise AccentIndexError(e.index, e.mora_count, line_number, line) from e
        except ValueError as e:
            raise DictionaryLoadError(line_number, line, str(e)) from e

    return word, WordAccents(reading, tuple(entries))


class AccentDictionary(Mapping[str, Tuple[WordAccents, ...]]):
    """Read-only mapping from a word to its dictionary rows.

    Several rows may share a word (homographs, alternate readings); they are
    kept in resource order. Instances are never mutated after construction and
    can be shared freely between threads.
    """

    def __init__(self, rows: Mapping[str, Tuple[WordAccents, ...]]):
        self._rows = MappingProxyType(dict(rows))

    def __getitem__(self, word: str) -> Tuple[WordAccents, ...]:
        return self._rows[word]

    def __iter__(self) -> Iterator[str]:
        return iter(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def lookup(self, word: str) -> Tuple[WordAccents, ...]:
        """Return the rows for *word*, or an empty tuple when it is unknown."""
        return self._rows.get(word, ())

    def __repr__(self) -> str:
        return f"AccentDictionary({len(self)} words)"


def load_dictionary(resource: str) -> AccentDictionary:
    """Build an ``AccentDictionary`` from the text of an accent resource.

    Blank lines are ignored. Any malformed line aborts the whole load with a
    ``DictionaryLoadError`` naming the line.
    """
    rows: Dict[str, List[WordAccents]] = {}
    row_count = 0
    for line_number, line in enumerate(resource.splitlines(), start=1):
        if not line.strip():
            continue
        word, word_accents = parse_line(line, line_number)
        rows.setdefault(word, []).append(word_accents)
        row_count += 1

    logger.info(f"Loaded {row_count} accent rows for {len(rows)} words")
    return AccentDictionary({word: tuple(entries) for word, entries in rows.items()})


def load_dictionary_file(path: str = ACCENTS_PATH) -> AccentDictionary:
    """Read the accent resource at *path* (UTF-8) and build the dictionary."""
    logger.info(f"Opening accent resource: {path}")
    with open(path, "r", encoding="utf-8") as f:
        resource = f.read()
    return load_dictionary(resource)
