import copy
from typing import Generator

import pytest

import app as app_module
from texty.analysis import TextAnalyzer
from texty.analysis.text_utils import SyllableCounter
from texty.highlight import HighlightDetector


@pytest.fixture(name="analyzer")
def analyzer_fixture() -> TextAnalyzer:
    """A fresh analyzer per test so syllable caches never leak between tests."""
    return TextAnalyzer()


@pytest.fixture(name="syllables")
def syllables_fixture() -> SyllableCounter:
    return SyllableCounter()


@pytest.fixture(name="detector")
def detector_fixture() -> HighlightDetector:
    return HighlightDetector()


@pytest.fixture(name="client")
def client_fixture(monkeypatch) -> Generator:
    """Flask test client running against a private copy of the default config.

    Yields:
        FlaskClient: The test client.
    """
    monkeypatch.setattr(app_module, "flask_app_config", copy.deepcopy(app_module.DEFAULT_CONFIG))
    monkeypatch.setattr(app_module, "api_processor", None)
    app_module.app.testing = True
    with app_module.app.test_client() as client:
        yield client
