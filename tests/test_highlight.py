from texty import detect_highlights
from texty.highlight import Highlight, HighlightDetector, HighlightType, resolve_overlaps
from texty.highlight.detector import ADVERB_SUGGESTION, KEYWORD_SUGGESTION, PASSIVE_SUGGESTION

LONG_SENTENCE = " ".join(["word"] * 25 + ["end."])


def _span(start, end, kind=HighlightType.ADVERB):
    return Highlight(start, end, kind, "x" * (end - start))


def _assert_spans_match(text, highlights):
    for h in highlights:
        assert text[h.start:h.end] == h.text


def test_empty_text(detector):
    assert detector.detect("") == []
    assert detect_highlights("", ["seo"]) == []


def test_passive_voice_with_irregular_participle(detector):
    text = "The report was written by Sam."
    [highlight] = detector.detect(text)
    assert highlight.type is HighlightType.PASSIVE
    assert (highlight.start, highlight.end) == (11, 22)
    assert highlight.text == "was written"
    assert highlight.suggestion == PASSIVE_SUGGESTION


def test_passive_voice_able_to(detector):
    highlights = detector.detect("We were unable to attend.")
    assert [h.text for h in highlights] == ["were unable to"]


def test_adverbs(detector):
    [highlight] = detector.detect("He ran quickly.")
    assert highlight.type is HighlightType.ADVERB
    assert (highlight.start, highlight.end) == (7, 14)
    assert highlight.suggestion == ADVERB_SUGGESTION


def test_non_adverbs_are_ignored(detector):
    assert detector.detect("Only the family went early, as was likely.") == []


def test_critical_keywords_match_whole_words_case_insensitively(detector):
    text = "SEO tips for seo. Not seoish."
    highlights = detector.detect(text, ["seo"])
    assert [(h.start, h.text) for h in highlights] == [(0, "SEO"), (13, "seo")]
    assert all(h.type is HighlightType.KEYWORD for h in highlights)
    assert highlights[0].suggestion == KEYWORD_SUGGESTION


def test_single_keyword_string_is_one_keyword():
    text = "SEO tips for seo. Not seoish."
    highlights = detect_highlights(text, "seo")
    assert [(h.start, h.text) for h in highlights] == [(0, "SEO"), (13, "seo")]


def test_keywords_are_escaped(detector):
    assert detector.detect("c++ is fun (c++)", ["c+"]) == []
    assert detector.detect("nothing here", [" ", ""]) == []


def test_long_sentence_is_complex(detector):
    text = "Short one. " + LONG_SENTENCE
    [highlight] = detector.detect(text)
    assert highlight.type is HighlightType.COMPLEX
    assert highlight.start == 11
    assert highlight.end == len(text)
    assert "26 words" in highlight.suggestion
    _assert_spans_match(text, [highlight])


def test_sentence_at_threshold_is_not_complex(detector):
    assert detector.detect(" ".join(["word"] * 24 + ["end."])) == []


def test_complex_threshold_is_configurable():
    detector = HighlightDetector(config={"complex_sentence_words": 3})
    [highlight] = detector.detect("one two three four.")
    assert highlight.type is HighlightType.COMPLEX


def test_resolve_overlaps_keeps_smaller_start():
    first, second, third = _span(0, 10), _span(5, 15), _span(15, 20)
    assert resolve_overlaps([second, third, first]) == [first, third]


def test_resolve_overlaps_same_start_keeps_first_detected():
    passive = _span(0, 8, HighlightType.PASSIVE)
    adverb = _span(0, 4, HighlightType.ADVERB)
    assert resolve_overlaps([passive, adverb]) == [passive]


def test_complex_sentence_swallows_inner_highlights(detector):
    text = "It was finished quickly and " + " ".join(["word"] * 25) + "."
    raw = detector.detect_all(text)
    kinds = {h.type for h in raw}
    assert {HighlightType.PASSIVE, HighlightType.ADVERB, HighlightType.COMPLEX} <= kinds
    [kept] = detector.detect(text)
    assert kept.type is HighlightType.COMPLEX


def test_detected_highlights_are_ordered_and_disjoint(detector):
    text = (
        "The cake was baked slowly. Honestly, the seo team is really tired of seo. "
        "Mistakes were made. " + LONG_SENTENCE
    )
    highlights = detector.detect(text, ["seo"])
    assert highlights
    for prev, cur in zip(highlights, highlights[1:]):
        assert prev.end <= cur.start
    _assert_spans_match(text, highlights)


def test_unicode_and_markup_input(detector):
    text = "<b>Ärgerlich</b> & «schnell» — was bedeutet das?"
    highlights = detector.detect(text)
    _assert_spans_match(text, highlights)
