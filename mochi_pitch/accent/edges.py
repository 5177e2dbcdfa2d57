"""Border edges that draw a pitch contour over a row of mora boxes.

``BOTTOM`` marks a low mora, ``TOP`` a high one and ``LEFT`` a change of pitch
at the left side of the box. Adjoining boxes then form the usual staircase.
"""

from typing import FrozenSet, List

from .base import AccentType, Atamadaka, Edge, Heiban, Nakadaka, Odaka
from .morae import mora_count

EdgeSet = FrozenSet[Edge]

LOW = frozenset({Edge.BOTTOM})
HIGH = frozenset({Edge.TOP})
RISE = frozenset({Edge.LEFT, Edge.TOP})
DROP = frozenset({Edge.LEFT, Edge.BOTTOM})


def _mora_edges(accent_type: AccentType, i: int, n: int) -> EdgeSet:
    if isinstance(accent_type, Heiban):
        if i == 0:
            return LOW
        return RISE if i == 1 else HIGH
    if isinstance(accent_type, Atamadaka):
        if i == 0:
            return HIGH
        return DROP if i == 1 else LOW
    if isinstance(accent_type, Odaka):
        if i == 0:
            return HIGH if n == 1 else LOW
        return RISE if i == 1 else HIGH
    if isinstance(accent_type, Nakadaka):
        drop = accent_type.drop_index
        if i == 0:
            return LOW
        if i == 1:
            return RISE
        if i < drop:
            return HIGH
        return DROP if i == drop else LOW
    raise TypeError(f"Unsupported accent type: {accent_type!r}")


def _particle_edges(accent_type: AccentType) -> EdgeSet:
    if isinstance(accent_type, Heiban):
        return HIGH
    if isinstance(accent_type, (Atamadaka, Nakadaka)):
        return LOW
    if isinstance(accent_type, Odaka):
        return DROP
    raise TypeError(f"Unsupported accent type: {accent_type!r}")


def edges(reading: str, accent_type: AccentType) -> List[EdgeSet]:
    """Return the edge set of every mora of *reading*, plus one for the particle.

    The result has ``mora_count(reading) + 1`` items; the last one belongs to
    the trailing particle glyph the renderer appends.
    """
    n = mora_count(reading)
    result = [_mora_edges(accent_type, i, n) for i in range(n)]
    result.append(_particle_edges(accent_type))
    return result
