"""Bulk update of a pitch-accent field across the cards of a Mochi deck."""

import re
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Dict, List, Optional

import jaconv

from mochi_pitch.accent import AccentDictionary, render
from mochi_pitch.logger import logger
from .client import MochiApiError, MochiClient
from .models import Card, Template

_TAG_RE = re.compile(r"<[^>]+>")


class UpdateConfig:
    def __init__(
        self,
        max_workers: int = 8,
        max_retries: int = 3,
        dry_run: bool = False,
    ):
        self.max_workers = max_workers
        self.max_retries = max_retries
        self.dry_run = dry_run


def get_retry_delay(retry_count: int) -> int:
    if retry_count == 1: return 2
    if retry_count == 2: return 5
    if retry_count == 3: return 15
    return 30


def resolve_field_id(template: Template, name: str) -> str:
    """Return the id of the template field called *name*."""
    for field_id, field in (template.fields or {}).items():
        if field.name == name:
            return field.id or field_id
    raise ValueError(f"Template '{template.name}' has no field named '{name}'")


def clean_word(value: Optional[str]) -> str:
    """Strip markup and normalise width so the word can be looked up."""
    if not value:
        return ""
    text = _TAG_RE.sub("", value).replace("&nbsp;", " ")
    return jaconv.normalize(text).strip()


class PitchCardUpdater:
    """Render the pitch diagram of each card's word into another field."""

    def __init__(
        self,
        client: MochiClient,
        dictionary: AccentDictionary,
        word_field_id: str,
        pitch_field_id: str,
        config: Optional[UpdateConfig] = None,
    ):
        self.client = client
        self.dictionary = dictionary
        self.word_field_id = word_field_id
        self.pitch_field_id = pitch_field_id
        self.config = config or UpdateConfig()

    def plan_update(self, card: Card) -> Optional[str]:
        """Return the new pitch markup for *card*, or None when it needs no update."""
        word = clean_word(card.field_value(self.word_field_id))
        if not word or word not in self.dictionary:
            return None
        markup = render(word, self.dictionary)
        if card.field_value(self.pitch_field_id) == markup:
            return None
        return markup

    def _update_with_retry(self, card: Card, markup: str) -> bool:
        """Send one card update, retrying with increasing delays."""
        attempts = self.config.max_retries + 1
        for attempt in range(1, attempts + 1):
            try:
                self.client.update_card(card.id, {self.pitch_field_id: markup})
                return True
            except MochiApiError as e:
                # 4xx answers (bad key, unknown card) will not change on retry
                if e.status_code < 500:
                    logger.error(f"❌ Update of card {card.id} rejected: {e}")
                    return False
                logger.warning(f"⚠️ Update of card {card.id} failed (attempt {attempt}/{attempts}): {e}")
            except Exception as e:
                logger.warning(f"⚠️ Update of card {card.id} failed (attempt {attempt}/{attempts}): {e}")
            if attempt < attempts:
                time.sleep(get_retry_delay(attempt))
        logger.error(f"❌ Giving up on card {card.id}")
        return False

    def update_cards(self, cards: List[Card]) -> Dict[str, object]:
        """Update every card that needs it and return aggregated statistics."""
        stats: Dict[str, object] = {"updated": 0, "skipped": 0, "failed": 0, "failed_ids": []}

        pending = []
        for card in cards:
            markup = self.plan_update(card)
            if markup is None:
                stats["skipped"] += 1
            else:
                pending.append((card, markup))

        logger.info(f"📋 {len(pending)} of {len(cards)} cards need a pitch update")
        if self.config.dry_run:
            for card, _ in pending:
                logger.info(f"Dry run: would update card {card.id}")
            stats["skipped"] += len(pending)
            return stats

        with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
            futures = {
                executor.submit(self._update_with_retry, card, markup): card
                for card, markup in pending
            }
            for future in as_completed(futures):
                card = futures[future]
                if future.result():
                    stats["updated"] += 1
                else:
                    stats["failed"] += 1
                    stats["failed_ids"].append(card.id)
        return stats

    def update_deck(self, deck_id: str) -> Dict[str, object]:
        logger.info(f"🚀 Updating pitch field for deck {deck_id}")
        cards = self.client.list_cards(deck_id)
        logger.info(f"📋 Fetched {len(cards)} cards")
        return self.update_cards(cards)
