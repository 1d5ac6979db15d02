import hashlib
from collections import Counter

from .models import PropertyBundle


def compute_sha256(value: str) -> str:
    """Compute SHA-256 hash for the string."""
    return hashlib.sha256(value.encode('utf-8')).hexdigest()


def is_palindrome(value: str) -> bool:
    """Check if string reads the same forward and backward (case-insensitive).

    Only case is folded; whitespace and punctuation take part in the
    comparison.
    """
    # One element per code point, even where lower() expands a character
    normalized = [ch.lower() for ch in value]
    return normalized == normalized[::-1]


def count_words(value: str) -> int:
    return len(value.split())


def build_frequency_map(value: str) -> dict:
    return dict(Counter(value))


def analyze_string(value: str) -> PropertyBundle:
    """Compute all required string properties."""
    return PropertyBundle(
        length=len(value),
        is_palindrome=is_palindrome(value),
        unique_characters=len(set(value)),
        word_count=count_words(value),
        sha256_hash=compute_sha256(value),
        character_frequency_map=build_frequency_map(value),
    )
