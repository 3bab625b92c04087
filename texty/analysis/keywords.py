from collections import Counter

from .models import DensityStatus, KeywordDensityEntry
from .text_utils import get_keyword_tokens

# Density thresholds in percent of all words
OPTIMAL_MAX_DENSITY = 3
WARNING_MAX_DENSITY = 5


def keyword_frequencies(words: list) -> Counter:
    """Counts keyword candidates; iteration order is first occurrence."""
    return Counter(get_keyword_tokens(words))


def classify_density(count: int, total_words: int) -> DensityStatus:
    # Integer comparison keeps the 3% / 5% boundaries exact
    if count * 100 > WARNING_MAX_DENSITY * total_words:
        return DensityStatus.CRITICAL
    if count * 100 > OPTIMAL_MAX_DENSITY * total_words:
        return DensityStatus.WARNING
    return DensityStatus.OPTIMAL


def extract_keywords(words: list, count: int = 7, min_frequency: int = 2) -> list:
    """Most frequent keywords, ties kept in order of first occurrence."""
    frequencies = keyword_frequencies(words)
    return [word for word, freq in frequencies.most_common() if freq >= min_frequency][:count]


def calculate_keyword_density(words: list, min_frequency: int = 2, limit: int = 15) -> list:
    total_words = len(words)
    if total_words == 0:
        return []
    entries = []
    for word, freq in keyword_frequencies(words).most_common():
        if freq < min_frequency:
            break
        entries.append(KeywordDensityEntry(
            word=word,
            count=freq,
            density=freq / total_words * 100,
            status=classify_density(freq, total_words),
        ))
    return entries[:limit]


def critical_keywords(entries: list) -> list:
    return [entry.word for entry in entries if entry.status is DensityStatus.CRITICAL]
