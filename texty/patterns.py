"""Regular expressions and word lists shared by the analyzer and the highlighter."""

import re

AUXILIARY_VERBS = r"(am|is|are|was|were|be|been|being)"

# Writing-style statistics: auxiliary + regular participle, auxiliary + able/unable to
PASSIVE_VOICE_STYLE_PATTERNS = [
    re.compile(rf"\b{AUXILIARY_VERBS}\s+\w+ed\b", re.IGNORECASE),
    re.compile(rf"\b{AUXILIARY_VERBS}\s+(able|unable)\s+to\b", re.IGNORECASE),
]

# Highlighting also knows the common irregular participles
PASSIVE_VOICE_HIGHLIGHT_PATTERNS = [
    re.compile(
        rf"\b{AUXILIARY_VERBS}\s+(\w+ed|gotten|given|taken|made|done|gone|seen|known|written)\b",
        re.IGNORECASE,
    ),
    re.compile(rf"\b{AUXILIARY_VERBS}\s+(able|unable)\s+to\b", re.IGNORECASE),
]

ADVERB_PATTERN = re.compile(r"\b\w+ly\b", re.IGNORECASE)

# Common words ending in 'ly' that are not adverbs
NON_ADVERBS = frozenset([
    "only", "early", "daily", "holy", "ugly", "family", "supply", "apply",
    "reply", "likely", "lovely", "lonely", "friendly",
])

COMPLEX_SENTENCE_WORDS = re.compile(r"\b(although|however|because|therefore)\b", re.IGNORECASE)

SENTENCE_PATTERN = re.compile(r"[^.!?]+[.!?]+")

FORMAL_MARKERS = ["therefore", "thus", "furthermore", "moreover", "consequently", "nevertheless"]
CASUAL_MARKERS = ["yeah", "gonna", "wanna", "kinda", "sorta", "cool", "awesome", "really"]
