#!/usr/bin/env python3
import argparse
from dotenv import load_dotenv

load_dotenv()

from mochi_pitch import ACCENTS_PATH
from mochi_pitch.accent import load_dictionary_file
from mochi_pitch.logger import logger
from mochi_pitch.mochi import (
    MochiClient,
    PitchCardUpdater,
    UpdateConfig,
    get_mochi_config,
    resolve_field_id,
)


def parse_args():
    parser = argparse.ArgumentParser(description="Write pitch-accent diagrams into a Mochi deck")
    parser.add_argument('--deck', type=str, help="Deck id to update")
    parser.add_argument('--word-field', type=str, default="Word", help="Template field holding the word")
    parser.add_argument('--pitch-field', type=str, default="Pitch", help="Template field receiving the diagram")
    parser.add_argument('--accents', type=str, default=ACCENTS_PATH, help="Accent resource (TSV)")
    parser.add_argument('--workers', type=int, default=8)
    parser.add_argument('--retries', type=int, default=3)
    parser.add_argument('--dry-run', action='store_true')
    parser.add_argument('--list-decks', action='store_true', help="Print the available decks and exit")
    args = parser.parse_args()
    if args.workers < 1:
        parser.error("--workers must be at least 1")
    if args.retries < 0:
        parser.error("--retries must not be negative")
    if not args.list_decks and not args.deck:
        parser.error("--deck is required unless --list-decks is given")
    return args


def main():
    args = parse_args()
    client = MochiClient(get_mochi_config())
    try:
        if args.list_decks:
            for deck in client.list_decks():
                logger.info(f"{deck.id}  {deck.name}")
            return

        dictionary = load_dictionary_file(args.accents)

        deck = next((d for d in client.list_decks() if d.id == args.deck), None)
        if deck is None:
            logger.error(f"❌ Deck '{args.deck}' does not exist")
            return
        if not deck.template_id:
            logger.error(f"❌ Deck '{deck.name}' has no template")
            return
        template = client.get_template(deck.template_id)

        updater = PitchCardUpdater(
            client,
            dictionary,
            word_field_id=resolve_field_id(template, args.word_field),
            pitch_field_id=resolve_field_id(template, args.pitch_field),
            config=UpdateConfig(max_workers=args.workers, max_retries=args.retries, dry_run=args.dry_run),
        )
        stats = updater.update_deck(deck.id)
    finally:
        client.close()

    logger.info("📊 ===== Update Summary =====")
    logger.info(f"✅ Updated: {stats['updated']}")
    logger.info(f"⏭️ Skipped: {stats['skipped']}")
    logger.info(f"❌ Failed: {stats['failed']}")
    if stats['failed_ids']:
        logger.warning(f"⚠️ Failed cards: {', '.join(stats['failed_ids'])}")
    logger.info("🏁 ===== Update Completed =====")


if __name__ == "__main__":
    main()
