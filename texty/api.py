"""
Functional entry points of the engine.

A module-level default `TextAnalyzer` backs `analyze`; it is created on first
use and lives for the rest of the process so its syllable cache is reused.
`reset_default_analyzer` replaces it, e.g. to apply new configuration or to
isolate tests.
"""

from typing import Optional

from .analysis import AnalysisResult, TextAnalyzer
from .highlight import detect_highlights, render_highlighted_markup

_default_analyzer: Optional[TextAnalyzer] = None


def get_default_analyzer() -> TextAnalyzer:
    global _default_analyzer
    if _default_analyzer is None:
        _default_analyzer = TextAnalyzer()
    return _default_analyzer


def reset_default_analyzer(config=None) -> TextAnalyzer:
    global _default_analyzer
    _default_analyzer = TextAnalyzer(config=config)
    return _default_analyzer


def analyze(text: str, analyzer: Optional[TextAnalyzer] = None) -> AnalysisResult:
    return (analyzer or get_default_analyzer()).analyze(text)


__all__ = [
    "analyze",
    "detect_highlights",
    "render_highlighted_markup",
    "get_default_analyzer",
    "reset_default_analyzer",
]
