"""Formatting utilities for pasted text: tag stripping, tidying, case conversion
and formatting extraction."""

from .autoformat import CASE_TYPES, auto_format, convert_case
from .extract import FormattingInfo, extract_formatting, format_for_display
from .strip import strip_formatting
