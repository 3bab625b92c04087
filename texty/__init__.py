"""Texty: readability, keyword and writing-style analysis with inline highlighting."""

from .api import (
    analyze,
    detect_highlights,
    get_default_analyzer,
    render_highlighted_markup,
    reset_default_analyzer,
)
from .analysis import AnalysisResult, TextAnalyzer
from .highlight import Highlight, HighlightDetector, HighlightType

__version__ = "2.0.0"
