"""
Fuzzy name matching.

Decides whether two raw names plausibly belong to the same person. Passport
names and flight ticket names differ in word order, titles and missing middle
names, so matching works on normalized variants rather than raw strings.
"""

import logging
from enum import Enum

from config import MIN_COMMON_NAME_WORDS
from utils.normalization import NameNormalizer

logger = logging.getLogger(__name__)


class MatchPolicy(Enum):
    """
    Matching policies.

    OVERLAP_ONLY: same variant, same words in any order, or at least two
        shared words.
    STRICT_FIRST_TOKEN: same variant, or same first word AND at least two
        shared words. Keeps "Gaurang Desai" and "Rita Desai" apart even when a
        middle name is shared, at the cost of word-order tolerance.
    """
    OVERLAP_ONLY = "overlap_only"
    STRICT_FIRST_TOKEN = "strict_first_token"


class NameMatcher:
    """Compares raw names under one policy chosen at construction."""

    def __init__(self, policy=MatchPolicy.OVERLAP_ONLY, normalizer=None,
                 min_common_words=MIN_COMMON_NAME_WORDS):
        self.policy = policy
        self.normalizer = normalizer or NameNormalizer()
        self.min_common_words = min_common_words

    def names_match(self, name_a, name_b):
        """
        Check whether two raw names refer to the same person.

        Every variant of one name is compared with every variant of the other;
        the first matching pair wins. A name without variants never matches.

        Args:
            name_a: First raw name
            name_b: Second raw name

        Returns:
            bool: True if any variant pair matches

        Example:
            ("John Smith", "SMITH JOHN MR") -> True
            ("Rita Desai", "Gaurang Desai") -> False
            ("", "John Smith") -> False
        """
        variants_a = self.normalizer.variants_of(name_a)
        variants_b = self.normalizer.variants_of(name_b)

        if not variants_a or not variants_b:
            return False

        for variant_a in variants_a:
            for variant_b in variants_b:
                if self._variants_match(variant_a, variant_b):
                    logger.debug(f"Names match: '{name_a}' ~ '{name_b}' ({variant_a} / {variant_b})")
                    return True

        return False

    def _variants_match(self, variant_a, variant_b):
        if variant_a == variant_b:
            return True

        words_a = variant_a.split()
        words_b = variant_b.split()

        # Single words are only trusted on exact equality
        if len(words_a) < 2 or len(words_b) < 2:
            return False

        common = [word for word in words_a if word in words_b]

        if self.policy == MatchPolicy.STRICT_FIRST_TOKEN:
            return words_a[0] == words_b[0] and len(common) >= self.min_common_words

        if sorted(words_a) == sorted(words_b):
            return True

        return len(common) >= self.min_common_words


_default_matcher = NameMatcher()


def names_match(name_a, name_b):
    """Module-level shortcut using the default (overlap-only) policy."""
    return _default_matcher.names_match(name_a, name_b)
