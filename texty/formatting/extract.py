from dataclasses import dataclass, field
from typing import List, Optional

from bs4 import BeautifulSoup

TAG_STYLES = {
    "b": "Bold", "strong": "Bold",
    "i": "Italic", "em": "Italic",
    "u": "Underline",
    "s": "Strikethrough", "strike": "Strikethrough",
    "h1": "Heading", "h2": "Heading", "h3": "Heading",
    "h4": "Heading", "h5": "Heading", "h6": "Heading",
}
IGNORED_ELEMENTS = {"div", "span", "font"}
DEFAULT_FONT_WEIGHT = "400"


@dataclass
class FormattingInfo:
    """Formatting found in a pasted HTML fragment."""
    fonts: List[str] = field(default_factory=list)
    sizes: List[str] = field(default_factory=list)
    weights: List[str] = field(default_factory=list)
    colors: List[str] = field(default_factory=list)
    styles: List[str] = field(default_factory=list)
    elements: List[str] = field(default_factory=list)
    has_formatting: bool = False

    def to_dict(self) -> dict:
        return {
            "fonts": self.fonts,
            "sizes": self.sizes,
            "weights": self.weights,
            "colors": self.colors,
            "styles": self.styles,
            "elements": self.elements,
            "hasFormatting": self.has_formatting,
        }


def parse_inline_style(style: str) -> dict:
    """'font-size: 12px; color: red' -> {'font-size': '12px', 'color': 'red'}"""
    declarations = {}
    for declaration in style.split(";"):
        if ":" not in declaration:
            continue
        prop, value = declaration.split(":", 1)
        prop, value = prop.strip().lower(), value.strip()
        if prop and value:
            declarations[prop] = value
    return declarations


def _add(bucket: list, value) -> None:
    if value and value not in bucket:
        bucket.append(value)


def extract_formatting(html: str) -> Optional[FormattingInfo]:
    """
    Collects fonts, sizes, weights, colors, tag-derived styles and element
    names from an HTML fragment. Returns None for input without markup.
    """
    if not html or "<" not in html:
        return None

    soup = BeautifulSoup(html, "html.parser")
    for script in soup("script"):
        script.decompose()

    fonts, sizes, weights, colors, styles, elements = [], [], [], [], [], []
    for el in soup.find_all(True):
        tag = el.name.lower()
        _add(elements, tag)

        css = parse_inline_style(el.get("style", ""))
        _add(fonts, css.get("font-family", "").replace('"', "").replace("'", ""))
        _add(sizes, css.get("font-size"))
        _add(weights, css.get("font-weight"))
        _add(colors, css.get("color"))

        _add(styles, TAG_STYLES.get(tag))

        _add(fonts, el.get("face"))
        _add(sizes, el.get("size"))
        _add(colors, el.get("color"))

    return FormattingInfo(
        fonts=fonts[:5],
        sizes=sizes[:5],
        weights=[w for w in weights if w != DEFAULT_FONT_WEIGHT][:5],
        colors=colors[:8],
        styles=styles,
        elements=[e for e in elements if e not in IGNORED_ELEMENTS][:8],
        has_formatting=bool(fonts or sizes or styles or colors),
    )


def format_for_display(info: Optional[FormattingInfo]) -> Optional[list]:
    if not info or not info.has_formatting:
        return None
    display = []
    for label, values in (
        ("Fonts", info.fonts),
        ("Sizes", info.sizes),
        ("Weights", info.weights),
        ("Colors", info.colors),
        ("Styles", info.styles),
        ("Elements", info.elements),
    ):
        if values:
            display.append({"label": label, "values": values})
    return display
