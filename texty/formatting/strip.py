import re

from bs4 import BeautifulSoup, Comment

BULLET = "•"

# Block-level markup turned into line breaks before parsing
HTML_LINE_BREAKS = [
    (re.compile(r"<br\s*/?>", re.IGNORECASE), "\n"),
    (re.compile(r"</p>\s*<p[^>]*>", re.IGNORECASE), "\n\n"),
    (re.compile(r"<li[^>]*>", re.IGNORECASE), f"\n{BULLET} "),
    (re.compile(r"</li>", re.IGNORECASE), ""),
    (re.compile(r"</div>", re.IGNORECASE), "\n"),
    (re.compile(r"</h[1-6]>", re.IGNORECASE), "\n"),
]

NON_CONTENT_TAGS = ["script", "style", "noscript", "template"]


def collapse_whitespace(text: str) -> str:
    text = re.sub(r"[ \t]+", " ", text)
    return re.sub(r"[ \t]*\n[ \t]*", "\n", text)


def html_to_text(html: str) -> str:
    """Text content of an HTML fragment, scripts, styles and comments removed."""
    soup = BeautifulSoup(html, "html.parser")
    for element in soup(NON_CONTENT_TAGS):
        element.decompose()
    for comment in soup.find_all(string=lambda text: isinstance(text, Comment)):
        comment.extract()
    return soup.get_text()


def strip_formatting(text: str) -> str:
    """
    Converts pasted rich text or HTML into plain text.

    Plain text only has its whitespace normalised. HTML has its block
    structure mapped to line breaks, its tags removed and at most three
    consecutive newlines kept.
    """
    if not text:
        return ""

    if "<" not in text:
        return collapse_whitespace(text).strip()

    for pattern, replacement in HTML_LINE_BREAKS:
        text = pattern.sub(replacement, text)

    clean_text = collapse_whitespace(html_to_text(text))
    clean_text = re.sub(r"\n{4,}", "\n\n\n", clean_text)
    return clean_text.strip()
