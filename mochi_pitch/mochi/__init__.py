"""Mochi flashcard API client and the pitch field updater built on it."""

from .client import MochiApiError, MochiClient, MochiConfig, get_mochi_config
from .models import Card, CardField, Deck, PaginatedResponse, Template, TemplateField
from .updater import PitchCardUpdater, UpdateConfig, resolve_field_id

__all__ = [
    'Card',
    'CardField',
    'Deck',
    'MochiApiError',
    'MochiClient',
    'MochiConfig',
    'PaginatedResponse',
    'PitchCardUpdater',
    'Template',
    'TemplateField',
    'UpdateConfig',
    'get_mochi_config',
    'resolve_field_id',
]
