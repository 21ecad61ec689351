"""Shared pytest fixtures for script_architect tests."""

import pytest

from script_architect.models import ScriptRequest
from script_architect.profiles import ASPECT_PROFILES, MOOD_PROFILES


@pytest.fixture
def calm_profile():
    return MOOD_PROFILES["calm"]


@pytest.fixture
def energetic_profile():
    return MOOD_PROFILES["energetic"]


@pytest.fixture
def landscape_profile():
    return ASPECT_PROFILES["16:9"]


@pytest.fixture
def vertical_profile():
    return ASPECT_PROFILES["9:16"]


@pytest.fixture
def scenario_request() -> ScriptRequest:
    """Two-beat request used across generator, validator and export tests."""
    return ScriptRequest(
        topic="How AI Works",
        story="AI learns from data. It predicts outcomes.",
        mood="energetic",
        aspect_ratio="9:16",
        keywords="",
        language="en",
    )


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    """Keep developer environment variables out of the tests."""
    for name in (
        "SCRIPT_ARCHITECT_OUTPUT_DIR",
        "SCRIPT_ARCHITECT_SHARE_BASE_URL",
        "SCRIPT_ARCHITECT_VALIDATE",
        "APP_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
