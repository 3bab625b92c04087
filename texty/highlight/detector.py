import re
from typing import Iterable, List

from ..base_module import TextModule
from ..patterns import (
    ADVERB_PATTERN,
    NON_ADVERBS,
    PASSIVE_VOICE_HIGHLIGHT_PATTERNS,
    SENTENCE_PATTERN,
)
from .models import Highlight, HighlightType

DEFAULT_COMPLEX_SENTENCE_WORDS = 25

PASSIVE_SUGGESTION = "Consider using active voice for stronger writing"
ADVERB_SUGGESTION = "Consider removing or replacing this adverb for stronger writing"
KEYWORD_SUGGESTION = "This keyword is overused (>5% density). Consider using synonyms"
COMPLEX_SUGGESTION = "This sentence has {count} words. Consider breaking it into shorter sentences"


def resolve_overlaps(highlights: Iterable[Highlight]) -> List[Highlight]:
    """
    Drops highlights that overlap an earlier kept one.

    Highlights are ordered by start first (stable, so earlier detections win
    ties). A highlight is kept only if it starts at or after the end of the
    last kept highlight.
    """
    result = []
    last_end = -1
    for highlight in sorted(highlights, key=lambda h: h.start):
        if highlight.start >= last_end:
            result.append(highlight)
            last_end = highlight.end
    return result


class HighlightDetector(TextModule):
    """Finds passive voice, adverbs, overused keywords and long sentences in raw text."""

    def __init__(self, config=None):
        super().__init__(config=config)
        self.complex_sentence_words = self.get_int_option("complex_sentence_words", DEFAULT_COMPLEX_SENTENCE_WORDS)

    def analyze(self, text: str, critical_keywords: Iterable[str] = ()) -> List[Highlight]:
        return self.detect(text, critical_keywords)

    def detect(self, text: str, critical_keywords: Iterable[str] = ()) -> List[Highlight]:
        """Sorted, non-overlapping highlights for `text`."""
        resolved = resolve_overlaps(self.detect_all(text, critical_keywords))
        self.debug("kept %d highlights", len(resolved))
        return resolved

    def detect_all(self, text: str, critical_keywords: Iterable[str] = ()) -> List[Highlight]:
        """Every detected highlight ordered by start, overlaps included."""
        if not text:
            return []
        highlights = []
        highlights.extend(self._detect_passive(text))
        highlights.extend(self._detect_adverbs(text))
        highlights.extend(self._detect_keywords(text, critical_keywords))
        highlights.extend(self._detect_complex_sentences(text))
        return sorted(highlights, key=lambda h: h.start)

    def _detect_passive(self, text: str):
        for pattern in PASSIVE_VOICE_HIGHLIGHT_PATTERNS:
            for match in pattern.finditer(text):
                yield Highlight(match.start(), match.end(), HighlightType.PASSIVE, match.group(0), PASSIVE_SUGGESTION)

    def _detect_adverbs(self, text: str):
        for match in ADVERB_PATTERN.finditer(text):
            if match.group(0).lower() in NON_ADVERBS:
                continue
            yield Highlight(match.start(), match.end(), HighlightType.ADVERB, match.group(0), ADVERB_SUGGESTION)

    def _detect_keywords(self, text: str, critical_keywords: Iterable[str]):
        if isinstance(critical_keywords, str):
            critical_keywords = (critical_keywords,)
        for keyword in critical_keywords:
            keyword = keyword.strip().lower()
            if not keyword:
                continue
            pattern = re.compile(rf"\b{re.escape(keyword)}\b", re.IGNORECASE)
            for match in pattern.finditer(text):
                yield Highlight(match.start(), match.end(), HighlightType.KEYWORD, match.group(0), KEYWORD_SUGGESTION)

    def _detect_complex_sentences(self, text: str):
        for match in SENTENCE_PATTERN.finditer(text):
            raw = match.group(0)
            sentence = raw.strip()
            if not sentence:
                continue
            word_count = len(sentence.split())
            if word_count <= self.complex_sentence_words:
                continue
            # Trim the span to the sentence itself so text[start:end] == sentence
            start = match.start() + (len(raw) - len(raw.lstrip()))
            end = start + len(sentence)
            yield Highlight(start, end, HighlightType.COMPLEX, sentence,
                            COMPLEX_SUGGESTION.format(count=word_count))


def detect_highlights(text: str, critical_keywords: Iterable[str] = (), config=None) -> List[Highlight]:
    return HighlightDetector(config=config).detect(text, critical_keywords)
