"""Text analysis package.

Provides `TextAnalyzer` orchestrating the lexical scanner, readability,
keyword, writing-style and scoring helpers implemented in sibling modules.
"""

from .analyzer import TextAnalyzer
from .models import (
    AnalysisResult,
    DensityStatus,
    KeywordDensityEntry,
    ReadabilityScores,
    Tone,
    WritingStyle,
)
