"""Tests for the shareable query-string codec."""

from script_architect.models import ScriptRequest
from script_architect.share import (
    DEFAULT_REQUEST,
    build_share_url,
    decode_query,
    encode_query,
    request_from_params,
    request_to_params,
)


class TestRoundTrip:
    def test_decode_encode(self, scenario_request):
        assert decode_query(encode_query(scenario_request)) == scenario_request

    def test_special_characters_survive(self):
        request = ScriptRequest(
            topic="Q&A: what's AI?",
            story="Line one.\nLine two = 50% done!",
            aspect_ratio="1:1",
            mood="inspirational",
            keywords="a, b; c",
            language="fr",
        )
        assert decode_query(encode_query(request)) == request

    def test_canonical_parameter_names(self, scenario_request):
        assert list(request_to_params(scenario_request)) == [
            "topic",
            "story",
            "aspect_ratio",
            "mood",
            "keywords",
            "language",
        ]


class TestAliases:
    def test_camel_case_and_related_keywords(self):
        request = request_from_params("aspectRatio=1:1&related_keywords=robots")
        assert request.aspect_ratio == "1:1"
        assert request.keywords == "robots"

    def test_first_alias_wins(self):
        request = request_from_params("aspectRatio=1:1&aspect_ratio=9:16&related_keywords=x&keywords=y")
        assert request.aspect_ratio == "9:16"
        assert request.keywords == "y"

    def test_first_repeated_value_wins(self):
        assert request_from_params("mood=energetic&mood=calm").mood == "energetic"

    def test_mapping_input(self):
        request = request_from_params({"topic": "Robots", "language": ["de", "fr"]})
        assert request.topic == "Robots"
        assert request.language == "de"


class TestDefaults:
    def test_missing_params_keep_defaults(self):
        request = request_from_params("topic=Robots")
        assert request.topic == "Robots"
        assert request.story == DEFAULT_REQUEST.story
        assert request.keywords == DEFAULT_REQUEST.keywords

    def test_blank_story_is_kept(self):
        assert request_from_params("story=").story == ""

    def test_full_url(self):
        request = request_from_params("http://localhost:3000/?topic=Space&mood=energetic")
        assert request.topic == "Space"
        assert request.mood == "energetic"

    def test_leading_question_mark(self):
        assert request_from_params("?topic=Space").topic == "Space"


class TestQuestionMarkInValue:
    def test_bare_query(self):
        request = decode_query("topic=Why?&mood=energetic")
        assert request.topic == "Why?"
        assert request.mood == "energetic"

    def test_full_url(self):
        request = decode_query("https://example.org/?topic=Why?&mood=energetic")
        assert request.topic == "Why?"
        assert request.mood == "energetic"


def test_build_share_url(scenario_request):
    url = build_share_url(scenario_request, "https://example.org/")
    assert url.startswith("https://example.org/?topic=How+AI+Works&story=")
    assert decode_query(url) == scenario_request
