"""
Result types produced by the text analyzer.

Every result is an immutable snapshot built fresh for each call. `to_dict()`
returns the JSON shape served by the API.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Union

UNDEFINED_GRADE = "—"


class DensityStatus(Enum):
    """Keyword density classification."""
    OPTIMAL = "optimal"
    WARNING = "warning"
    CRITICAL = "critical"

    def __str__(self) -> str:
        return self.value


class Tone(Enum):
    """Overall tone of a text."""
    FORMAL = "formal"
    NEUTRAL = "neutral"
    CASUAL = "casual"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class KeywordDensityEntry:
    """A keyword with its occurrence count and share of all words."""
    word: str
    count: int
    density: float
    status: DensityStatus

    def to_dict(self) -> dict:
        return {
            "word": self.word,
            "count": self.count,
            "density": self.density,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class ReadabilityScores:
    flesch: int = 0
    flesch_grade: str = UNDEFINED_GRADE
    gunning_fog: float = 0.0
    smog: float = 0.0
    coleman_liau: float = 0.0
    automated_readability: float = 0.0

    def to_dict(self) -> dict:
        return {
            "flesch": self.flesch,
            "fleschGrade": self.flesch_grade,
            "gunningFog": self.gunning_fog,
            "smog": self.smog,
            "colemanLiau": self.coleman_liau,
            "automatedReadability": self.automated_readability,
        }


@dataclass(frozen=True)
class WritingStyle:
    passive_voice_percentage: int = 0
    adverb_count: int = 0
    complex_sentence_percentage: int = 0
    avg_sentence_length: int = 0
    tone: Tone = Tone.NEUTRAL

    def to_dict(self) -> dict:
        return {
            "passiveVoicePercentage": self.passive_voice_percentage,
            "adverbCount": self.adverb_count,
            "complexSentencePercentage": self.complex_sentence_percentage,
            "avgSentenceLength": self.avg_sentence_length,
            "toneIndicator": self.tone.value,
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Aggregated statistics for one text."""
    words: int = 0
    unique_words: int = 0
    characters: int = 0
    sentences: int = 0
    paragraphs: int = 0
    avg_word_length: float = 0.0
    reading_time: Union[str, int] = "0"
    flesch_score: int = 0
    grade_level: str = UNDEFINED_GRADE
    keywords: List[str] = field(default_factory=list)
    keyword_density: List[KeywordDensityEntry] = field(default_factory=list)
    readability: ReadabilityScores = field(default_factory=ReadabilityScores)
    writing_style: WritingStyle = field(default_factory=WritingStyle)
    seo_score: int = 0

    @property
    def critical_keywords(self) -> List[str]:
        return [entry.word for entry in self.keyword_density if entry.status is DensityStatus.CRITICAL]

    def to_dict(self) -> dict:
        return {
            "words": self.words,
            "uniqueWords": self.unique_words,
            "characters": self.characters,
            "sentences": self.sentences,
            "paragraphs": self.paragraphs,
            "avgWordLength": self.avg_word_length,
            "readingTime": self.reading_time,
            "fleschScore": self.flesch_score,
            "gradeLevel": self.grade_level,
            "keywords": list(self.keywords),
            "keywordDensity": [entry.to_dict() for entry in self.keyword_density],
            "readability": self.readability.to_dict(),
            "writingStyle": self.writing_style.to_dict(),
            "seoScore": self.seo_score,
        }
