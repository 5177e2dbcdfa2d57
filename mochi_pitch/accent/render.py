"""HTML rendering of pitch-accent diagrams.

Mochi renders card fields without stylesheet support, so every element
carries its style inline and the strings below must not change.
"""

from typing import Iterable

from .base import AccentEntry, Edge, WordAccents
from .dictionary import AccentDictionary
from .edges import edges
from .morae import segment

PARTICLE_MARKER = "…"

BORDER_STYLES = {
    Edge.TOP: "BORDER-TOP: #FF6633 medium solid;",
    Edge.BOTTOM: "BORDER-BOTTOM: #FF6633 medium solid;",
    Edge.LEFT: "BORDER-LEFT: #FF6633 medium solid;",
}

ENTRY_SEPARATOR = "・"
ROW_SEPARATOR = '<div style="line-height:100%;"><br></div>'
WRAPPER_START = '<div style="text-align: center">'
WRAPPER_END = "</div>"


def render_mora(mora: str, mora_edges: Iterable[Edge]) -> str:
    present = set(mora_edges)
    style = "".join(BORDER_STYLES[edge] for edge in Edge if edge in present)
    return f'<span style="{style}">{mora}</span>'


def render_note(note: str) -> str:
    return f"<b>{note}: </b>"


def render_entry(reading: str, entry: AccentEntry) -> str:
    """Render one accent pattern of *reading*, particle marker included."""
    morae = segment(reading + PARTICLE_MARKER)
    spans = "".join(
        render_mora(mora, mora_edges)
        for mora, mora_edges in zip(morae, edges(reading, entry.accent_type))
    )
    if entry.note:
        return render_note(entry.note) + spans
    return spans


def render_word_accents(word_accents: WordAccents) -> str:
    return ENTRY_SEPARATOR.join(
        render_entry(word_accents.reading, entry) for entry in word_accents.entries
    )


def render(word: str, dictionary: AccentDictionary) -> str:
    """Return the pitch diagram markup for *word*.

    Unknown words yield an empty wrapper rather than an error.
    """
    body = ROW_SEPARATOR.join(
        render_word_accents(word_accents) for word_accents in dictionary.lookup(word)
    )
    return f"{WRAPPER_START}{body}{WRAPPER_END}"
