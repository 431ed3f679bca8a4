import hashlib
import re
from collections import Counter

from .models import StringProperties

NON_ALNUM_RE = re.compile(r"[^a-z0-9]")


def length(value: str) -> int:
    """Length in UTF-16 code units, so characters outside the BMP count as two."""
    return len(value.encode('utf-16-le', 'surrogatepass')) // 2


def compute_sha256(value: str) -> str:
    """Compute SHA-256 hash for the string."""
    return hashlib.sha256(value.encode('utf-8')).hexdigest()


def is_palindrome(value: str) -> bool:
    """Check if string reads the same forward and backward, ignoring case and anything outside a-z0-9."""
    normalized = NON_ALNUM_RE.sub('', value.lower())
    return normalized == normalized[::-1]


def unique_character_count(value: str) -> int:
    return len(set(value))


def word_count(value: str) -> int:
    """Count space separated words. Only the space character separates words, tabs and newlines don't."""
    return len([token for token in value.split(' ') if token])


def character_frequency(value: str) -> dict:
    return dict(Counter(value))


def analyze_string(value: str) -> StringProperties:
    """Compute all required string properties."""
    return StringProperties(
        length=length(value),
        is_palindrome=is_palindrome(value),
        unique_characters=unique_character_count(value),
        word_count=word_count(value),
        sha256_hash=compute_sha256(value),
        character_frequency_map=character_frequency(value),
    )
