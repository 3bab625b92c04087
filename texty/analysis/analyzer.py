from dataclasses import replace

from ..base_module import TextModule
from .keywords import calculate_keyword_density, extract_keywords
from .models import AnalysisResult, UNDEFINED_GRADE
from .readability import calculate_readability
from .scoring import calculate_seo_score
from .style import analyze_writing_style
from .text_utils import (
    DEFAULT_SYLLABLE_CACHE_SIZE,
    SyllableCounter,
    round_half_up,
    split_paragraphs,
    split_sentences,
    split_words,
)

WORDS_PER_MINUTE = 200
# Below these word counts the corresponding statistic is not meaningful
MIN_WORDS_FOR_GRADE = 11
MIN_WORDS_FOR_DENSITY = 11
MIN_WORDS_FOR_KEYWORDS = 21


def calculate_reading_time(word_count: int):
    if word_count == 0:
        return "0"
    if word_count < 100:
        return "<1"
    return -(-word_count // WORDS_PER_MINUTE)


class TextAnalyzer(TextModule):
    """Computes readability, keyword and writing-style statistics for a text."""

    def __init__(self, config=None):
        super().__init__(config=config)
        self.top_n_keywords = self.get_int_option("top_n_keywords_count", 7)
        self.min_keyword_frequency = self.get_int_option("min_keyword_frequency", 2)
        self.keyword_density_limit = self.get_int_option("keyword_density_limit", 15)
        self.syllable_counter = SyllableCounter(
            self.get_int_option("syllable_cache_size", DEFAULT_SYLLABLE_CACHE_SIZE)
        )

    def count_syllables(self, word: str) -> int:
        return self.syllable_counter.count(word)

    def analyze(self, text: str) -> AnalysisResult:
        if not text or not text.strip():
            return AnalysisResult()

        words = split_words(text)
        sentences = split_sentences(text)
        paragraphs = split_paragraphs(text)
        word_count = len(words)

        readability = calculate_readability(words, sentences, len(text), self.syllable_counter)
        if word_count < MIN_WORDS_FOR_GRADE:
            readability = replace(readability, flesch_grade=UNDEFINED_GRADE)
        writing_style = analyze_writing_style(text, words, sentences)

        keyword_density = []
        if word_count >= MIN_WORDS_FOR_DENSITY:
            keyword_density = calculate_keyword_density(
                words, self.min_keyword_frequency, self.keyword_density_limit
            )
        keywords = []
        if word_count >= MIN_WORDS_FOR_KEYWORDS:
            keywords = extract_keywords(words, self.top_n_keywords, self.min_keyword_frequency)

        seo_score = calculate_seo_score(keyword_density, readability.flesch, writing_style)
        avg_word_length = round_half_up(sum(len(w) for w in words) / word_count, 1)

        self.debug("analyzed %d words, %d sentences, cache size %d",
                   word_count, len(sentences), len(self.syllable_counter))

        return AnalysisResult(
            words=word_count,
            unique_words=len({w.lower() for w in words}),
            characters=len(text),
            sentences=len(sentences),
            paragraphs=len(paragraphs),
            avg_word_length=avg_word_length,
            reading_time=calculate_reading_time(word_count),
            flesch_score=readability.flesch,
            grade_level=readability.flesch_grade,
            keywords=keywords,
            keyword_density=keyword_density,
            readability=readability,
            writing_style=writing_style,
            seo_score=seo_score,
        )
