from texty.analysis.models import Tone, WritingStyle
from texty.analysis.style import (
    analyze_writing_style,
    count_passive_voice,
    detect_tone,
    is_adverb,
    is_complex_sentence,
)
from texty.analysis.text_utils import split_sentences, split_words


def _style(text):
    return analyze_writing_style(text, split_words(text), split_sentences(text))


def test_empty_text_is_neutral():
    assert analyze_writing_style("", [], []) == WritingStyle()
    assert WritingStyle().tone is Tone.NEUTRAL


def test_passive_voice_percentage():
    style = _style("The ball was kicked by the boy. The cake is baked.")
    assert style.passive_voice_percentage == 100


def test_passive_voice_able_variant():
    assert count_passive_voice("They were unable to finish.") == 1
    assert count_passive_voice("I am able to help.") == 1
    assert count_passive_voice("She writes code.") == 0


def test_adverbs():
    assert is_adverb("quickly")
    assert not is_adverb("only")
    assert not is_adverb("family")
    assert not is_adverb("fly")
    assert not is_adverb("early.")
    assert _style("She quickly and quietly left early.").adverb_count == 2
    assert _style("The family finally arrived.").adverb_count == 1


def test_complex_sentences():
    assert is_complex_sentence("However this is fine")
    assert is_complex_sentence("Apples, pears, and plums")
    assert not is_complex_sentence("Apples and pears")
    style = _style("However, it rained. We stayed home.")
    assert style.complex_sentence_percentage == 50


def test_average_sentence_length():
    assert _style("One two three. Four five six seven.").avg_sentence_length == 4


def test_formal_tone():
    text = (
        "The committee therefore concluded that the proposal moreover satisfied every "
        "documented requirement established by the board during the extensive review process last year."
    )
    assert _style(text).tone is Tone.FORMAL


def test_neutral_tone():
    text = "The quick brown fox jumps over the lazy dog while the farmer watches from his porch."
    assert _style(text).tone is Tone.NEUTRAL


def test_casual_tone():
    assert _style("Yeah that was awesome.").tone is Tone.CASUAL
    assert detect_tone("plain words", 10) is Tone.CASUAL
    assert detect_tone("gonna be cool " + "word " * 30, 22) is Tone.CASUAL
