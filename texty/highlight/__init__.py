"""Inline highlighting package.

Provides `HighlightDetector` for span detection and the markup renderer.
"""

from .detector import HighlightDetector, detect_highlights, resolve_overlaps
from .models import Highlight, HighlightType
from .render import escape_html, render_highlighted_markup
