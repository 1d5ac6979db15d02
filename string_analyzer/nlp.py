import logging
import re

from .errors import ConflictingFiltersError
from .models import FilterSet

logger = logging.getLogger(__name__)


def _number(match):
    return int(next(g for g in match.groups() if g is not None))


def _letter(match):
    return next(g for g in match.groups() if g is not None)


def _constant(value):
    return lambda match: value


# Rules run in this order against the lowercased query. When two rules set the
# same field, the later match wins, so the order is part of the behaviour.
RULES = [
    # Word count
    (r"single word", "word_count", _constant(1)),
    (r"two words|2 words", "word_count", _constant(2)),
    (r"(\d+)\s+words?", "word_count", _number),
    # Palindrome
    (r"palindrome|palindromic", "is_palindrome", _constant(True)),
    # Length bounds
    (r"longer than (\d+)|greater than (\d+)", "min_length",
     lambda m: _number(m) + 1),
    (r"shorter than (\d+)|less than (\d+)", "max_length",
     lambda m: _number(m) - 1),
    (r"at least (\d+)", "min_length", _number),
    (r"at most (\d+)", "max_length", _number),
    # Contained character
    (r"contain(?:ing|s)? (?:the )?letter ([a-z])|with letter ([a-z])",
     "contains_character", _letter),
    (r"containing ([a-z])\b", "contains_character", _letter),
    # Vowel aliases are fixed, not read from the query
    (r"first vowel", "contains_character", _constant("a")),
    (r"last vowel", "contains_character", _constant("u")),
]

COMPILED_RULES = [(re.compile(pattern, re.ASCII), name, project)
                  for pattern, name, project in RULES]


def parse_natural_language_query(query: str) -> FilterSet:
    """Translate a free-text query into a FilterSet.

    Returns an empty FilterSet when nothing is recognised. Raises
    ConflictingFiltersError when the derived length bounds cannot both hold.
    """
    query_lower = query.lower()
    parsed_filters = {}

    for pattern, name, project in COMPILED_RULES:
        match = pattern.search(query_lower)
        if match:
            parsed_filters[name] = project(match)

    min_length = parsed_filters.get("min_length")
    max_length = parsed_filters.get("max_length")

    if max_length is not None and max_length < 0:
        logger.info("Query %r asks for a negative max_length", query)
        raise ConflictingFiltersError(
            "Conflicting filters detected: max_length cannot be negative.",
            filters=parsed_filters,
        )

    if min_length is not None and max_length is not None and min_length > max_length:
        logger.info("Query %r yields min_length %d > max_length %d",
                    query, min_length, max_length)
        raise ConflictingFiltersError(
            "Conflicting filters detected: min_length cannot be greater than max_length.",
            filters=parsed_filters,
        )

    return FilterSet.from_dict(parsed_filters)
