"""
Name normalization utilities.

Turns a raw extracted name into one or more comparable variants:
- Slash-separated dual names ("SMITH JOHN/SMITH JANE MRS") give one variant each
- A '?' separator keeps the readable part after it
- Lowercase letters and single spaces only
- Honorifics (mr, mrs, dr, ...) removed wherever they stand alone

Also holds the case-insensitive column lookup used when re-reading exports.
"""

import re
import logging

from config import HONORIFICS, NAME_SEGMENT_SEPARATOR, NAME_ALTERNATE_SEPARATOR

logger = logging.getLogger(__name__)


class NameNormalizer:
    """
    Produces normalized name variants.

    The honorific list is fixed at construction so that different callers can
    use their own without touching module state.
    """

    def __init__(self, honorifics=None):
        """
        Args:
            honorifics: Words to drop from names. Defaults to config.HONORIFICS.
        """
        if honorifics is None:
            honorifics = HONORIFICS
        self.honorifics = frozenset(word.lower() for word in honorifics)

    def variants_of(self, raw_name):
        """
        Get all normalized variants of a raw name.

        Args:
            raw_name: Name as read from a document (may be None)

        Returns:
            list: Variant strings, at most one per '/'-separated segment

        Example:
            "SMITH JOHN/SMITH JANE MRS" -> ["smith john", "smith jane"]
            "Mr. John O'Brien" -> ["john obrien"]
            "" -> []
        """
        if not raw_name or not isinstance(raw_name, str):
            return []

        variants = []
        for segment in raw_name.split(NAME_SEGMENT_SEPARATOR):
            words = self._words_of(self._readable_part(segment))
            if words:
                variants.append(' '.join(words))

        return variants

    def normalize_name(self, raw_name):
        """First variant of a raw name, or "" if it has none."""
        variants = self.variants_of(raw_name)
        return variants[0] if variants else ""

    def _readable_part(self, segment):
        if NAME_ALTERNATE_SEPARATOR not in segment:
            return segment
        before, _, after = segment.partition(NAME_ALTERNATE_SEPARATOR)
        return after if after.strip() else before

    def _words_of(self, text):
        text = text.lower()
        text = re.sub(r'[^a-z\s]', '', text)
        text = re.sub(r'\s+', ' ', text).strip()
        return [word for word in text.split(' ') if word and word not in self.honorifics]


_default_normalizer = NameNormalizer()


def variants_of(raw_name):
    """Module-level shortcut using the default honorific list."""
    return _default_normalizer.variants_of(raw_name)


def normalize_name(raw_name):
    """Module-level shortcut using the default honorific list."""
    return _default_normalizer.normalize_name(raw_name)


def standardize_column_names(df):
    """
    Create a case-insensitive column mapping for a DataFrame.

    Args:
        df: pandas DataFrame

    Returns:
        dict: Mapping from lowercase column names to actual column names

    Example:
        {"passport number": "Passport Number", "name": "NAME"}
    """
    column_map = {}
    for col in df.columns:
        column_map[str(col).strip().lower()] = col
    return column_map
