from dataclasses import dataclass
from enum import Enum


class HighlightType(Enum):
    """Kinds of writing issues marked inline."""
    PASSIVE = "passive"
    ADVERB = "adverb"
    KEYWORD = "keyword"
    COMPLEX = "complex"

    def __str__(self) -> str:
        return self.value

    @property
    def css_class(self) -> str:
        return f"highlight-{self.value}"


@dataclass(frozen=True)
class Highlight:
    """A half-open span [start, end) of the original text."""
    start: int
    end: int
    type: HighlightType
    text: str
    suggestion: str = ""

    def overlaps(self, other: "Highlight") -> bool:
        return self.start < other.end and other.start < self.end

    def to_dict(self) -> dict:
        return {
            "start": self.start,
            "end": self.end,
            "type": self.type.value,
            "text": self.text,
            "suggestion": self.suggestion,
        }
