import logging
import math
import re
import threading
from collections import OrderedDict

logger = logging.getLogger(__name__)

# Curated list of English stopwords excluded from keyword statistics
STOPWORDS = frozenset([
    "the", "and", "to", "of", "a", "in", "for", "is", "on", "that", "by", "this", "with",
    "i", "you", "it", "not", "or", "be", "are", "from", "at", "as", "your", "all", "any",
    "can", "had", "her", "was", "one", "our", "out", "day", "get", "has", "him", "his",
    "how", "man", "new", "now", "old", "see", "two", "way", "who", "boy", "did", "its",
    "let", "put", "say", "she", "too", "use", "have", "been", "other", "were", "which",
    "their", "what", "there", "when", "will", "would", "about", "into", "than", "them",
    "these", "some", "could", "only", "may", "then", "such", "an", "but", "we", "he",
    "me", "my", "so", "up", "if", "no", "do", "just", "they", "very", "more", "even",
    "also", "well", "back", "after", "should", "each", "where", "those", "much", "own",
    "most", "through", "being", "over", "here", "both", "while", "under", "same", "us",
])

RE_SPLIT_SENTENCES = re.compile(r"[.!?]+\s+|[.!?]+$")
RE_SPLIT_PARAGRAPHS = re.compile(r"\n\s*\n")
RE_CLEAN_WORD = re.compile(r"[^\w]")
RE_DIGITS_ONLY = re.compile(r"^[0-9]+$")

RE_SYLLABLE_CLEAN_END = re.compile(r"(?:[^laeiouy]es|ed|[^laeiouy]e)$")
RE_SYLLABLE_START_Y = re.compile(r"^y")
RE_VOWEL_GROUPS = re.compile(r"[aeiouy]{1,2}")

DEFAULT_SYLLABLE_CACHE_SIZE = 2000


def round_half_up(value: float, digits: int = 0) -> float:
    """Rounds halves away from zero for positive values (0.5 -> 1), unlike round()."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def split_words(text: str) -> list:
    """Whitespace tokens of the trimmed text, punctuation and case preserved."""
    trimmed = text.strip()
    return trimmed.split() if trimmed else []


def split_sentences(text: str) -> list:
    return [s for s in RE_SPLIT_SENTENCES.split(text) if s.strip()]


def split_paragraphs(text: str) -> list:
    return [p for p in RE_SPLIT_PARAGRAPHS.split(text) if p.strip()]


def clean_token(word: str) -> str:
    """Lowercases a word and strips every non-word character."""
    return RE_CLEAN_WORD.sub("", word.lower())


def is_keyword_candidate(token: str) -> bool:
    return len(token) > 2 and token not in STOPWORDS and not RE_DIGITS_ONLY.match(token)


def get_keyword_tokens(words: list) -> list:
    """Cleaned tokens eligible for keyword statistics, in document order."""
    tokens = []
    for word in words:
        clean = clean_token(word)
        if is_keyword_candidate(clean):
            tokens.append(clean)
    return tokens


class SyllableCounter:
    """Heuristic English syllable counter backed by a bounded LRU cache."""

    def __init__(self, capacity: int = DEFAULT_SYLLABLE_CACHE_SIZE):
        if capacity < 1:
            raise ValueError(f"Syllable cache capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._cache = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, word: str) -> bool:
        return word.lower().strip() in self._cache

    def count(self, word: str) -> int:
        if not word:
            return 0
        clean = word.lower().strip()

        # Shared across API requests served on different threads
        with self._lock:
            cached = self._cache.get(clean)
            if cached is not None:
                self._cache.move_to_end(clean)
                self.hits += 1
                return cached

            self.misses += 1
            syllables = self._estimate(clean)
            self._cache[clean] = syllables
            if len(self._cache) > self.capacity:
                evicted, _ = self._cache.popitem(last=False)
                logger.debug("Syllable cache full, evicted %r", evicted)
        return syllables

    @staticmethod
    def _estimate(word: str) -> int:
        if not word:
            return 0
        if RE_DIGITS_ONLY.match(word):
            return len(word)
        if len(word) <= 3:
            return 1
        processed = RE_SYLLABLE_CLEAN_END.sub("", word, count=1)
        processed = RE_SYLLABLE_START_Y.sub("", processed, count=1)
        return max(1, len(RE_VOWEL_GROUPS.findall(processed)))
