"""Tests for the bulk pitch field updater."""
import pytest
from unittest.mock import Mock, patch
from mochi_pitch.accent import render
from mochi_pitch.mochi import Card, MochiApiError, Template, PitchCardUpdater, UpdateConfig, resolve_field_id
from mochi_pitch.mochi.updater import clean_word, get_retry_delay


def make_card(card_id, word, pitch=None):
    fields = {"w": {"id": "w", "value": word}}
    if pitch is not None:
        fields["p"] = {"id": "p", "value": pitch}
    return Card.model_validate({"id": card_id, "deck-id": "d1", "fields": fields})


@pytest.fixture
def mock_client():
    return Mock()


@pytest.fixture
def updater(mock_client, accent_dictionary):
    return PitchCardUpdater(
        mock_client, accent_dictionary, word_field_id="w", pitch_field_id="p",
        config=UpdateConfig(max_workers=2, max_retries=2),
    )


class TestHelpers:
    """Test field resolution and word cleaning."""

    def test_resolve_field_id(self):
        template = Template.model_validate({
            "id": "t1", "name": "Vocab", "content": "",
            "fields": {
                "name": {"id": "name", "name": "Word", "pos": "a"},
                "pitch": {"id": "pitch", "name": "Pitch", "pos": "b"},
            },
        })
        assert resolve_field_id(template, "Pitch") == "pitch"
        with pytest.raises(ValueError):
            resolve_field_id(template, "Audio")

    def test_clean_word_strips_markup(self):
        assert clean_word("<b>箸</b>&nbsp;") == "箸"
        assert clean_word(None) == ""

    def test_clean_word_normalises_half_width(self):
        assert clean_word("ｻｯｶｰ") == "サッカー"

    def test_retry_delay_grows(self):
        assert get_retry_delay(1) < get_retry_delay(2) < get_retry_delay(3) <= get_retry_delay(10)


class TestPlanUpdate:
    """Test which cards need an update."""

    def test_known_word(self, updater, accent_dictionary):
        assert updater.plan_update(make_card("c1", "箸")) == render("箸", accent_dictionary)

    def test_unknown_word_skipped(self, updater):
        assert updater.plan_update(make_card("c1", "猫")) is None

    def test_up_to_date_card_skipped(self, updater, accent_dictionary):
        card = make_card("c1", "箸", pitch=render("箸", accent_dictionary))
        assert updater.plan_update(card) is None


class TestUpdateCards:
    """Test concurrent updates and result aggregation."""

    def test_updates_and_skips(self, updater, mock_client):
        cards = [make_card("c1", "箸"), make_card("c2", "橋"), make_card("c3", "猫")]
        stats = updater.update_cards(cards)

        assert stats["updated"] == 2
        assert stats["skipped"] == 1
        assert stats["failed"] == 0
        updated_ids = sorted(call.args[0] for call in mock_client.update_card.call_args_list)
        assert updated_ids == ["c1", "c2"]

    @patch('mochi_pitch.mochi.updater.time.sleep')
    def test_retry_then_success(self, mock_sleep, updater, mock_client):
        mock_client.update_card.side_effect = [Exception("boom"), Mock()]
        stats = updater.update_cards([make_card("c1", "箸")])

        assert stats["updated"] == 1
        assert mock_client.update_card.call_count == 2
        mock_sleep.assert_called_once_with(get_retry_delay(1))

    @patch('mochi_pitch.mochi.updater.time.sleep')
    def test_failures_are_aggregated(self, mock_sleep, updater, mock_client):
        """A failing card does not stop the others."""
        def update_card(card_id, fields):
            if card_id == "c1":
                raise Exception("server error")
            return Mock()
        mock_client.update_card.side_effect = update_card

        stats = updater.update_cards([make_card("c1", "箸"), make_card("c2", "橋")])

        assert stats["updated"] == 1
        assert stats["failed"] == 1
        assert stats["failed_ids"] == ["c1"]

    def test_dry_run_sends_nothing(self, mock_client, accent_dictionary):
        updater = PitchCardUpdater(
            mock_client, accent_dictionary, "w", "p", config=UpdateConfig(dry_run=True)
        )
        stats = updater.update_cards([make_card("c1", "箸")])

        mock_client.update_card.assert_not_called()
        assert stats["updated"] == 0
        assert stats["skipped"] == 1

    def test_update_deck_lists_cards(self, updater, mock_client):
        mock_client.list_cards.return_value = [make_card("c1", "端")]
        stats = updater.update_deck("d1")

        mock_client.list_cards.assert_called_once_with("d1")
        assert stats["updated"] == 1


class TestRetryPolicy:
    """Test how many attempts an update gets."""

    def test_zero_retries_still_sends_once(self, mock_client, accent_dictionary):
        """max_retries counts retries, so zero means a single attempt."""
        updater = PitchCardUpdater(
            mock_client, accent_dictionary, "w", "p", config=UpdateConfig(max_retries=0)
        )
        stats = updater.update_cards([make_card("c1", "箸")])

        assert mock_client.update_card.call_count == 1
        assert stats["updated"] == 1
        assert stats["failed"] == 0

    @patch('mochi_pitch.mochi.updater.time.sleep')
    def test_retries_after_first_attempt(self, mock_sleep, updater, mock_client):
        """Two retries give three attempts with a pause between each."""
        mock_client.update_card.side_effect = Exception("server error")
        stats = updater.update_cards([make_card("c1", "箸")])

        assert mock_client.update_card.call_count == 3
        assert mock_sleep.call_count == 2
        assert stats["failed_ids"] == ["c1"]

    @patch('mochi_pitch.mochi.updater.time.sleep')
    def test_client_error_not_retried(self, mock_sleep, updater, mock_client):
        """A 4xx answer fails the card at once."""
        mock_client.update_card.side_effect = MochiApiError("POST", "cards/c1", 404, "not found")
        stats = updater.update_cards([make_card("c1", "箸")])

        assert mock_client.update_card.call_count == 1
        mock_sleep.assert_not_called()
        assert stats["failed_ids"] == ["c1"]

    @patch('mochi_pitch.mochi.updater.time.sleep')
    def test_server_error_retried(self, mock_sleep, updater, mock_client):
        """A 5xx answer is retried like any other transient failure."""
        mock_client.update_card.side_effect = [
            MochiApiError("POST", "cards/c1", 503, "unavailable"), Mock(),
        ]
        stats = updater.update_cards([make_card("c1", "箸")])

        assert mock_client.update_card.call_count == 2
        assert stats["updated"] == 1
