"""Pitch-accent compiler: morae, accent dictionary, border edges and HTML."""

from .base import (
    AccentEntry,
    AccentIndexError,
    AccentType,
    Atamadaka,
    DictionaryLoadError,
    Edge,
    Heiban,
    Nakadaka,
    Odaka,
    WordAccents,
)
from .morae import segment, mora_count
from .dictionary import AccentDictionary, classify, load_dictionary, load_dictionary_file, parse_code
from .edges import edges
from .render import render

__all__ = [
    'AccentDictionary',
    'AccentEntry',
    'AccentIndexError',
    'AccentType',
    'Atamadaka',
    'DictionaryLoadError',
    'Edge',
    'Heiban',
    'Nakadaka',
    'Odaka',
    'WordAccents',
    'classify',
    'edges',
    'load_dictionary',
    'load_dictionary_file',
    'mora_count',
    'parse_code',
    'render',
    'segment',
]
