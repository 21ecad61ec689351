"""Tests for profile lookups and their fallbacks."""

from script_architect.profiles import (
    ASPECT_PROFILES,
    LANGUAGE_LABELS,
    MOOD_PROFILES,
    resolve_aspect,
    resolve_language,
    resolve_mood,
)


class TestResolveMood:
    def test_known_moods(self):
        for key, profile in MOOD_PROFILES.items():
            assert resolve_mood(key) is profile

    def test_unknown_mood_uses_calm(self):
        assert resolve_mood("nonexistent") is MOOD_PROFILES["calm"]
        assert resolve_mood("") is MOOD_PROFILES["calm"]
        assert resolve_mood(None) is MOOD_PROFILES["calm"]

    def test_palettes_have_three_colours(self):
        for profile in MOOD_PROFILES.values():
            assert len(profile.color_palette) == 3


class TestResolveAspect:
    def test_known_ratios(self):
        assert resolve_aspect("9:16") is ASPECT_PROFILES["9:16"]
        assert resolve_aspect("1:1") is ASPECT_PROFILES["1:1"]

    def test_unknown_ratio_uses_landscape(self):
        assert resolve_aspect("4:3") is ASPECT_PROFILES["16:9"]


class TestResolveLanguage:
    def test_labels(self):
        assert resolve_language("zh") == "Mandarin Chinese"
        assert resolve_language("es") == "Spanish"
        assert len(LANGUAGE_LABELS) == 8

    def test_unknown_language_is_english(self):
        assert resolve_language("klingon") == "English"
