"""Tests for per-beat scene heuristics."""

import pytest

from script_architect.scene_planner import (
    build_scene_label,
    create_overlay,
    create_supporting_assets,
    create_visual_direction,
    estimate_duration_seconds,
    format_duration,
    plan_scenes,
    select_keyword,
)


class TestSelectKeyword:
    def test_first_matching_keyword_in_list_order(self):
        keywords = ["outcomes", "predicts"]
        assert select_keyword("It predicts outcomes.", keywords, 0) == "outcomes"

    def test_match_is_case_insensitive(self):
        assert select_keyword("Modern AI systems", ["data", "AI"], 0) == "AI"

    def test_round_robin_fallback(self):
        keywords = ["alpha", "beta", "gamma"]
        assert select_keyword("Nothing matches here.", keywords, 4) == "beta"

    def test_insight_when_no_keywords(self):
        assert select_keyword("Anything.", [], 2) == "insight"


class TestSceneLabels:
    def test_four_beat_story(self):
        beats = [
            "Welcome to the show.",
            "Machine learning is everywhere.",
            "Models can predict the weather.",
            "That is the end.",
        ]
        labels = [build_scene_label(i, len(beats), beat) for i, beat in enumerate(beats)]
        assert labels == ["Opening Hook", "Learning Beat", "Application Beat", "Closing Insight"]

    def test_generic_beat_number(self):
        assert build_scene_label(2, 5, "Clouds drift slowly.") == "Beat 3"

    def test_learning_checked_before_application(self):
        assert build_scene_label(1, 4, "It learns to recognize faces.") == "Learning Beat"

    def test_single_beat_is_opening_hook(self):
        assert build_scene_label(0, 1, "Everything learns.") == "Opening Hook"

    def test_two_beats(self):
        assert build_scene_label(0, 2, "First.") == "Opening Hook"
        assert build_scene_label(1, 2, "It learns.") == "Closing Insight"


class TestDuration:
    @pytest.mark.parametrize(
        "word_count, expected",
        [(1, 4), (4, 4), (13, 5), (16, 6), (19, 7), (22, 8), (24, 9), (27, 9), (60, 9)],
    )
    def test_estimate_is_clamped(self, word_count, expected):
        text = " ".join(["word"] * word_count)
        assert estimate_duration_seconds(text) == expected

    def test_format(self):
        assert format_duration(6) == "6s"


class TestOverlay:
    def test_leading_content_words(self):
        voiceover = "Artificial intelligence is a system that learns patterns from data."
        assert create_overlay(voiceover, "data") == "Artificial intelligence system that learns patterns"

    def test_capitalizes_first_letter(self):
        assert create_overlay("it predicts outcomes.", "outcomes") == "Predicts outcomes"

    def test_preserves_letter_case_of_ai(self):
        voiceover = "ai-driven tools said hello to teams."
        assert create_overlay(voiceover, "ai") == "Aidriven tools said hello teams"

    def test_falls_back_to_keyword(self):
        assert create_overlay("It is so.", "neural networks") == "Key idea: Neural networks"


class TestVisualDirection:
    def test_data_rule_uses_motion_and_lighting(self, calm_profile, landscape_profile):
        visuals = create_visual_direction("Patterns emerge.", "data", calm_profile, landscape_profile)
        assert visuals == (
            "Visualize flowing data points morphing into a neural network mesh; "
            "gentle parallax moves and slow dolly pushes with diffused light with cool highlights."
        )

    def test_prediction_rule_uses_aspect_framing(self, calm_profile, vertical_profile):
        visuals = create_visual_direction("It predicts outcomes.", "x", calm_profile, vertical_profile)
        assert visuals.startswith("Show predictive dashboards")
        assert visuals.endswith(vertical_profile.framing_description)

    def test_training_rule(self, energetic_profile, landscape_profile):
        visuals = create_visual_direction("Training never stops.", "x", energetic_profile, landscape_profile)
        assert visuals == (
            "Illustrate an AI training loop with layered animations that progressively refine, "
            "paired with bold camera sweeps and quick punch-ins."
        )

    def test_human_rule(self, calm_profile, landscape_profile):
        visuals = create_visual_direction("Humans adapt too.", "x", calm_profile, landscape_profile)
        assert visuals.endswith("gently lit to stay diffused light with cool highlights.")

    def test_first_matching_rule_wins(self, calm_profile, landscape_profile):
        visuals = create_visual_direction(
            "Data helps it predict what humans learn.", "x", calm_profile, landscape_profile
        )
        assert visuals.startswith("Visualize flowing data points")

    def test_fallback_uses_keyword_and_palette(self, calm_profile, landscape_profile):
        visuals = create_visual_direction("Clouds drift slowly.", "weather", calm_profile, landscape_profile)
        assert visuals == "Create calm, abstract imagery around weather, using #E6F0FF and #C9DBF4 accents."


class TestSupportingAssets:
    def test_generic_broll_always_last(self):
        assert create_supporting_assets("Clouds drift.", "sky") == [
            "B-roll: contextual visuals highlighting sky."
        ]

    def test_all_matching_rules_contribute_in_order(self):
        assets = create_supporting_assets("Data lets it predict and adjust.", "data")
        assert assets == [
            "Overlay graph that pulses in sync with narration.",
            "HUD-style animation showing probability bars filling up.",
            "Progress bar that subtly advances with each beat.",
            "B-roll: contextual visuals highlighting data.",
        ]

    def test_improves_triggers_progress_bar(self):
        assets = create_supporting_assets("It improves.", "x")
        assert assets[0] == "Progress bar that subtly advances with each beat."


class TestPlanScenes:
    def test_ids_and_order(self, calm_profile, landscape_profile):
        beats = ["One beat here.", "Two beat here.", "Three beat here."]
        scenes = plan_scenes(beats, keywords=[], mood=calm_profile, aspect=landscape_profile)
        assert [scene.id for scene in scenes] == [1, 2, 3]
        assert [scene.voiceover for scene in scenes] == beats
        assert all(scene.assets for scene in scenes)
