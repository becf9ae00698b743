"""
Validation modules for passenger matching.

Includes:
- Fuzzy name matching with selectable policy
"""

from .name_matcher import NameMatcher, MatchPolicy, names_match

__all__ = [
    'NameMatcher',
    'MatchPolicy',
    'names_match'
]
