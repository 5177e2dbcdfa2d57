"""Kana to mora segmentation."""

from typing import List

# Small kana attach to the character before them. Small tsu is included so
# that a geminate joins the preceding mora (サッ), as the diagrams draw it.
COMBINING_KANA = frozenset("ぁぃぅぇぉっゃゅょァィゥェォッャュョヮ")


def segment(reading: str) -> List[str]:
    """Split *reading* into morae.

    A character starts a new mora unless the character after it is a small
    kana, in which case the two (or more) are kept together.

    >>> segment("れっしゃ")
    ['れっ', 'しゃ']
    """
    morae: List[str] = []
    current = ""
    for i, ch in enumerate(reading):
        current += ch
        next_ch = reading[i + 1] if i + 1 < len(reading) else None
        if next_ch is not None and next_ch in COMBINING_KANA:
            continue
        morae.append(current)
        current = ""
    return morae


def mora_count(reading: str) -> int:
    return len(segment(reading))
