import math

from .models import ReadabilityScores, UNDEFINED_GRADE
from .text_utils import SyllableCounter, round_half_up

COMPLEX_WORD_SYLLABLES = 3


def get_grade_level(score: float) -> str:
    """Maps a Flesch Reading Ease score to a school grade label."""
    if math.isnan(score) or score <= 0:
        return UNDEFINED_GRADE
    if score >= 100:
        return "Pre-school"
    if score >= 90:
        return "5th Grade"
    if score >= 80:
        return "6th Grade"
    if score >= 70:
        return "7th Grade"
    if score >= 60:
        return "8th-9th Grade"
    if score >= 50:
        return "10th-12th Grade"
    if score >= 30:
        return "College"
    return "Graduate"


def calculate_flesch_reading_ease(avg_words_per_sentence: float, avg_syllables_per_word: float) -> float:
    score = 206.835 - 1.015 * avg_words_per_sentence - 84.6 * avg_syllables_per_word
    return max(0.0, min(100.0, score))


def _grade_score(value: float) -> float:
    return max(0.0, round_half_up(value, 1))


def calculate_readability(words: list, sentences: list, characters: int,
                          syllable_counter: SyllableCounter) -> ReadabilityScores:
    """
    Computes Flesch Reading Ease, Gunning Fog, SMOG, Coleman-Liau and ARI.

    Args:
        words: Whitespace tokens of the text.
        sentences: Sentences of the text.
        characters: Total character count of the raw text.
        syllable_counter: Counter used for per-word syllable estimates.

    Returns:
        ReadabilityScores: All zero with an undefined grade when there are no
        words or no sentences.
    """
    num_words = len(words)
    num_sentences = len(sentences)
    if num_words == 0 or num_sentences == 0:
        return ReadabilityScores()

    syllables = [syllable_counter.count(word) for word in words]
    asl = num_words / num_sentences
    asw = sum(syllables) / num_words
    avg_chars = characters / num_words

    flesch = calculate_flesch_reading_ease(asl, asw)

    complex_words = sum(1 for s in syllables if s >= COMPLEX_WORD_SYLLABLES)
    gunning_fog = 0.4 * (asl + 100 * (complex_words / num_words))

    # Polysyllables share the complex-word rule
    smog = 1.0430 * math.sqrt(complex_words * (30 / num_sentences)) + 3.1291

    letters_per_100 = avg_chars * 100
    sentences_per_100 = (num_sentences / num_words) * 100
    coleman_liau = 0.0588 * letters_per_100 - 0.296 * sentences_per_100 - 15.8

    ari = 4.71 * avg_chars + 0.5 * asl - 21.43

    return ReadabilityScores(
        flesch=int(round_half_up(flesch)),
        flesch_grade=get_grade_level(flesch),
        gunning_fog=_grade_score(gunning_fog),
        smog=_grade_score(smog),
        coleman_liau=_grade_score(coleman_liau),
        automated_readability=_grade_score(ari),
    )
