"""Tests for kana to mora segmentation."""
import pytest
from mochi_pitch.accent.morae import segment, mora_count, COMBINING_KANA


class TestSegment:
    """Test the mora segmenter."""

    def test_long_vowel_mark_is_own_mora(self):
        """Small tsu joins the preceding kana, the long vowel mark stands alone."""
        assert segment("サッカー") == ["サッ", "カ", "ー"]

    def test_small_tsu_and_small_ya(self):
        """Geminate and palatalised kana attach to the preceding base."""
        assert segment("れっしゃ") == ["れっ", "しゃ"]

    def test_empty_reading(self):
        """Empty input yields no morae."""
        assert segment("") == []
        assert mora_count("") == 0

    def test_plain_kana(self):
        """Every plain kana is one mora."""
        assert segment("あのかた") == ["あ", "の", "か", "た"]

    @pytest.mark.parametrize("reading,expected", [
        ("とうきょう", ["と", "う", "きょ", "う"]),
        ("しんぶん", ["し", "ん", "ぶ", "ん"]),
        ("ちょっと", ["ちょっ", "と"]),
        ("クヮ", ["クヮ"]),
    ])
    def test_combining_sequences(self, reading, expected):
        """Small kana keep accumulating onto the current mora."""
        assert segment(reading) == expected

    def test_particle_marker_is_separate(self):
        """The ellipsis used for the particle never merges with the reading."""
        assert segment("かわ…") == ["か", "わ", "…"]

    def test_restartable(self):
        """Segmenting twice gives the same result."""
        assert segment("じかん") == segment("じかん")

    def test_leading_small_kana(self):
        """A small kana with nothing before it forms a mora by itself."""
        assert segment("ゃあ") == ["ゃ", "あ"]

    def test_combining_set_covers_katakana(self):
        """Katakana small kana are in the combining set."""
        for ch in "ァィゥェォッャュョヮ":
            assert ch in COMBINING_KANA
        assert "ー" not in COMBINING_KANA


class TestMoraCount:
    """Test mora counting."""

    def test_counts_segments(self):
        assert mora_count("はし") == 2
        assert mora_count("がっこう") == 3
        assert mora_count("コーヒー") == 4
