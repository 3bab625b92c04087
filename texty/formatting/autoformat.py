import re

CASE_TYPES = ("upper", "lower", "title", "sentence")

RE_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
RE_SENTENCE_START = re.compile(r"(^|[.!?]\s+)([a-z])")


def _capitalize_sentences(text: str) -> str:
    return RE_SENTENCE_START.sub(lambda m: m.group(1) + m.group(2).upper(), text)


def format_line(line: str) -> str:
    line = re.sub(r"[ \t]+", " ", line).strip()
    line = re.sub(r"\s+([,.!?;:])", r"\1", line)
    line = re.sub(r"([.!?])\s*([A-Z])", r"\1 \2", line)
    line = _capitalize_sentences(line)
    line = re.sub(r"\bi\b", "I", line)
    line = re.sub(r"\s+'", "'", line)
    return re.sub(r"'\s+", "'", line)


def auto_format(text: str) -> str:
    """Tidies spacing, punctuation and capitalisation paragraph by paragraph."""
    if not text or not text.strip():
        return ""

    paragraphs = []
    for paragraph in RE_PARAGRAPH_BREAK.split(text):
        lines = [format_line(line) for line in paragraph.split("\n") if line.strip()]
        formatted = "\n".join(line for line in lines if line)
        if formatted:
            paragraphs.append(formatted)
    return "\n\n".join(paragraphs)


def convert_case(text: str, case_type: str) -> str:
    if not text:
        return ""
    if case_type == "upper":
        return text.upper()
    if case_type == "lower":
        return text.lower()
    if case_type == "title":
        return re.sub(r"\w\S*", lambda m: m.group(0)[0].upper() + m.group(0)[1:].lower(), text)
    if case_type == "sentence":
        return _capitalize_sentences(text.lower())
    return text
