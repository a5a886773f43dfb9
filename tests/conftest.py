"""
Shared pytest fixtures for ClipTrans tests.
"""
import os
import sys
import tempfile
import pytest

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import Config, ConfigStore
from cliptrans.core.language import Language
from cliptrans.core.last_selection import LastSelectionStore
from cliptrans.core.state import PreferenceState


class FakeDetector:
    """Detector returning a fixed answer and recording calls."""

    def __init__(self, result=None):
        self.result = result
        self.calls = []

    def detect(self, text):
        self.calls.append(text)
        return self.result


@pytest.fixture
def temp_config_dir():
    """Create temporary config directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def config_store(temp_config_dir):
    return ConfigStore(temp_config_dir)


@pytest.fixture
def last_store(temp_config_dir):
    return LastSelectionStore(temp_config_dir)


@pytest.fixture
def config_file(temp_config_dir):
    return os.path.join(temp_config_dir, 'config.json')


@pytest.fixture
def sample_config():
    """A valid non-default config."""
    return Config(
        api_url="https://test-api.example.com",
        model_version="test-model",
        primary_language=Language.ITALIAN,
        secondary_language=Language.POLISH,
        selectable_languages=[Language.ENGLISH, Language.ITALIAN, Language.POLISH, Language.GERMAN],
    )


@pytest.fixture
def sample_config_json():
    """Sample config.json content."""
    return {
        "api_url": "https://custom.api.example.com",
        "model_version": "openai/gpt-4o-mini",
        "primary_language": "ES",
        "secondary_language": "IT",
        "selectable_languages": ["ES", "IT", "EN", "DE"],
    }


@pytest.fixture
def make_state(config_store, last_store):
    """Build a PreferenceState around the temp-dir stores."""
    def _make(config=None, last=Language.ENGLISH):
        return PreferenceState(config_store, last_store, config or Config(), last)
    return _make


@pytest.fixture
def fake_detector():
    return FakeDetector
