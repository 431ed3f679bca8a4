"""
Heuristic translation of natural language queries into a FilterSet.

Detectors run in a fixed order over the lower-cased query. Each returns a
partial patch (or None) and patches are applied one after another, so a later
detector overwrites a field set by an earlier one.
"""
import logging
import re
from typing import NamedTuple

from .exceptions import ConflictingFilters, Untranslatable
from .filters import FilterSet, WordCountConstraint

logger = logging.getLogger(__name__)

NUMERAL_RE = re.compile(r"\d+")
WORD_COUNT_RE = re.compile(r"(\d+) word")
CHARACTER_RE = re.compile(r"(?:letter|character) ([a-z0-9])(?![a-z0-9])")

# (phrase, target field, offset applied to the numeral), highest priority first
LENGTH_PHRASES = (
    ("longer than", "min_length", 1),
    ("at least", "min_length", 0),
    ("shorter than", "max_length", -1),
    ("at most", "max_length", 0),
)


class TranslatedQuery(NamedTuple):
    original: str
    filters: FilterSet

    def as_dict(self):
        return {"original": self.original, "parsed_filters": self.filters.as_dict()}


def detect_palindrome(text):
    patch = None
    if "palindrome" in text or "palindromic" in text:
        patch = {"is_palindrome": True}
    # negative phrasing contains the positive one, so it is checked last
    if "non-palindrome" in text or "not palindrome" in text:
        patch = {"is_palindrome": False}
    return patch


def detect_word_count(text):
    if "single word" in text or "one word" in text:
        return {"word_count": WordCountConstraint.exactly(1)}
    if "double word" in text or "two words" in text:
        return {"word_count": WordCountConstraint.exactly(2)}
    match = WORD_COUNT_RE.search(text)
    if match:
        return {"word_count": WordCountConstraint.exactly(int(match.group(1)))}
    return None


def detect_length(text):
    """
    Length bounds from "longer than", "at least", "shorter than" and "at most".

    Each phrase reads the numeral right after it, or the first numeral in the
    query when it has none of its own. The first phrase found wins its bound,
    so "longer than" beats "at least" and "shorter than" beats "at most".
    """
    first = NUMERAL_RE.search(text)
    if first is None:
        return None

    patch = {}
    for phrase, target, offset in LENGTH_PHRASES:
        if target in patch or phrase not in text:
            continue
        own = re.search(re.escape(phrase) + r"\s+(\d+)", text)
        number = int(own.group(1)) if own else int(first.group())
        patch[target] = number + offset
    return patch or None


def detect_character(text):
    match = CHARACTER_RE.search(text)
    if match:
        return {"contains_character": match.group(1).lower()}
    return None


def detect_vowel(text):
    # "vowel" also covers "first vowel"; always maps to "a"
    if "vowel" in text:
        return {"contains_character": "a"}
    return None


def detect_empty(text):
    if "empty" in text or "blank" in text:
        return {"min_length": 0}
    return None


def detect_multi_word(text):
    if "spaces" in text or "multi-word" in text:
        return {"word_count": WordCountConstraint.more_than(1)}
    return None


DETECTORS = (
    detect_palindrome,
    detect_word_count,
    detect_length,
    detect_character,
    detect_vowel,
    detect_empty,
    detect_multi_word,
)


def parse_filters(query: str) -> dict:
    """Run every detector and merge their patches, last write wins."""
    text = query.lower()
    parsed = {}
    for detector in DETECTORS:
        patch = detector(text)
        if patch:
            parsed.update(patch)
    return parsed


def translate(query: str) -> TranslatedQuery:
    """
    Translate a free text query into a FilterSet.

    Raises Untranslatable when no detector fired and ConflictingFilters when
    the resulting min_length is greater than max_length.
    """
    filters = FilterSet(**parse_filters(query))

    if filters.is_empty():
        logger.info("Could not translate query %r", query)
        raise Untranslatable(original=query, parsed_filters={})

    try:
        filters.validate()
    except ConflictingFilters as exc:
        logger.info("Conflicting filters in query %r: %s", query, filters.as_dict())
        exc.context.update(original=query, parsed_filters=filters.as_dict())
        raise

    return TranslatedQuery(original=query, filters=filters)
