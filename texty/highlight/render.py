from typing import Iterable

from .detector import resolve_overlaps
from .models import Highlight

HTML_ESCAPE_TABLE = str.maketrans({
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
})


def escape_html(text: str) -> str:
    return text.translate(HTML_ESCAPE_TABLE) if text else ""


def render_mark(highlight: Highlight, segment: str) -> str:
    return (
        f'<mark class="{highlight.type.css_class}" data-tooltip="{escape_html(highlight.suggestion)}">'
        f"{escape_html(segment)}</mark>"
    )


def render_highlighted_markup(text: str, highlights: Iterable[Highlight]) -> str:
    """
    Renders `text` as escaped HTML with each highlight wrapped in a <mark>.

    Overlapping highlights are resolved first, so any highlight list is safe.
    Marked content is `text[start:end]`, not the highlight's own text.
    """
    if not text:
        return ""
    parts = []
    last_index = 0
    for highlight in resolve_overlaps(highlights):
        start = max(highlight.start, last_index)
        end = min(highlight.end, len(text))
        if start >= end:
            continue
        parts.append(escape_html(text[last_index:start]))
        parts.append(render_mark(highlight, text[start:end]))
        last_index = end
    parts.append(escape_html(text[last_index:]))
    return "".join(parts)
