"""
Date formatting for export.

OCR output spells dates many ways ("1990-03-15", "15 MAR 1990", "15/03/1990").
DateFormatter rewrites whatever it can parse into one canonical style and
leaves everything else untouched.
"""

import re
import logging
from datetime import datetime
from enum import Enum

import pandas as pd

from config import DATE_INPUT_FORMATS, MONTH_ABBREVIATIONS

logger = logging.getLogger(__name__)


class DateStyle(Enum):
    """Canonical output styles."""
    DAY_MONTH_NAME_YEAR = "DD-MMM-YYYY"
    DAY_MONTH_YEAR = "DD-MM-YYYY"
    ISO = "YYYY-MM-DD"


# Values already in these shapes are returned as-is
CANONICAL_PATTERNS = {
    DateStyle.DAY_MONTH_NAME_YEAR: re.compile(r'^\d{2}-[A-Za-z]{3}-\d{4}$'),
    DateStyle.DAY_MONTH_YEAR: re.compile(r'^\d{2}-\d{2}-\d{4}$'),
    DateStyle.ISO: re.compile(r'^\d{4}-\d{2}-\d{2}$'),
}

DATE_TOKEN_PATTERN = re.compile(r'\d+|[A-Za-z]+')


def parse_date(date_str):
    """
    Parse a date string into a date object.

    Tries the explicit day-first formats from config first, then falls back to
    pandas' permissive parser.

    Args:
        date_str: Date string in any common spelling

    Returns:
        datetime.date: Parsed date, or None if parsing fails
    """
    if not date_str or not isinstance(date_str, str):
        return None

    date_str = date_str.strip()
    if not date_str:
        return None

    for fmt in DATE_INPUT_FORMATS:
        try:
            return datetime.strptime(date_str, fmt).date()
        except ValueError:
            continue

    # Needs a digit, otherwise words like "today" parse
    if not any(char.isdigit() for char in date_str):
        return None

    # Day, month and year must all be present; "1990" or "03/1990" stay as written
    if len(DATE_TOKEN_PATTERN.findall(date_str)) < 3:
        return None

    try:
        parsed = pd.to_datetime(date_str, dayfirst=True)
    except (ValueError, TypeError, OverflowError):
        return None

    if pd.isna(parsed):
        return None
    return parsed.date()


class DateFormatter:
    """
    Formats dates into a fixed canonical style.

    Example:
        DateFormatter(DateStyle.DAY_MONTH_NAME_YEAR).format_date("1990-03-15")
        -> "15-Mar-1990"
    """

    def __init__(self, style=DateStyle.DAY_MONTH_NAME_YEAR, month_names=None):
        self.style = style
        self.month_names = list(month_names or MONTH_ABBREVIATIONS)
        self.canonical_pattern = CANONICAL_PATTERNS[style]

    def format_date(self, raw):
        """
        Format a raw date value.

        Args:
            raw: Date string or None

        Returns:
            str: "" for absent input, the canonical form when parsable,
                 otherwise the input unchanged
        """
        if raw is None:
            return ""
        if not isinstance(raw, str):
            raw = str(raw)
        if not raw.strip():
            return ""

        if self.canonical_pattern.match(raw):
            return raw

        parsed = parse_date(raw)
        if parsed is None:
            logger.debug(f"Could not parse date, keeping as-is: {raw}")
            return raw

        return self._render(parsed)

    def _render(self, value):
        if self.style == DateStyle.DAY_MONTH_NAME_YEAR:
            return f"{value.day:02d}-{self.month_names[value.month - 1]}-{value.year:04d}"
        if self.style == DateStyle.DAY_MONTH_YEAR:
            return f"{value.day:02d}-{value.month:02d}-{value.year:04d}"
        return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


_default_formatter = DateFormatter()


def format_date(raw):
    """Format a date in the export style (DD-MMM-YYYY)."""
    return _default_formatter.format_date(raw)
