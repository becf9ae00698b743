"""
Utility functions for name normalization and date formatting.
"""

from .normalization import (
    NameNormalizer,
    variants_of,
    normalize_name,
    standardize_column_names
)

from .date_formatter import (
    DateFormatter,
    DateStyle,
    parse_date,
    format_date
)

__all__ = [
    'NameNormalizer',
    'variants_of',
    'normalize_name',
    'standardize_column_names',
    'DateFormatter',
    'DateStyle',
    'parse_date',
    'format_date'
]
