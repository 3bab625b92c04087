from .models import Tone, WritingStyle
from .text_utils import clean_token, round_half_up
from ..patterns import (
    CASUAL_MARKERS,
    COMPLEX_SENTENCE_WORDS,
    FORMAL_MARKERS,
    NON_ADVERBS,
    PASSIVE_VOICE_STYLE_PATTERNS,
)


def count_passive_voice(text: str) -> int:
    return sum(len(pattern.findall(text)) for pattern in PASSIVE_VOICE_STYLE_PATTERNS)


def is_adverb(word: str) -> bool:
    return len(word) > 4 and word.lower().endswith("ly") and clean_token(word) not in NON_ADVERBS


def is_complex_sentence(sentence: str) -> bool:
    return sentence.count(",") >= 2 or bool(COMPLEX_SENTENCE_WORDS.search(sentence))


def detect_tone(text: str, avg_sentence_length: int) -> Tone:
    text_lower = text.lower()
    formal_count = sum(1 for marker in FORMAL_MARKERS if marker in text_lower)
    casual_count = sum(1 for marker in CASUAL_MARKERS if marker in text_lower)
    if formal_count > casual_count and avg_sentence_length > 20:
        return Tone.FORMAL
    if casual_count > formal_count or avg_sentence_length < 15:
        return Tone.CASUAL
    return Tone.NEUTRAL


def analyze_writing_style(text: str, words: list, sentences: list) -> WritingStyle:
    num_words = len(words)
    num_sentences = len(sentences)
    if num_words == 0 or num_sentences == 0:
        return WritingStyle()

    passive_matches = count_passive_voice(text)
    adverb_count = sum(1 for word in words if is_adverb(word))
    complex_count = sum(1 for sentence in sentences if is_complex_sentence(sentence))
    avg_sentence_length = int(round_half_up(num_words / num_sentences))

    return WritingStyle(
        passive_voice_percentage=int(round_half_up(passive_matches / num_sentences * 100)),
        adverb_count=adverb_count,
        complex_sentence_percentage=int(round_half_up(complex_count / num_sentences * 100)),
        avg_sentence_length=avg_sentence_length,
        tone=detect_tone(text, avg_sentence_length),
    )
