from .models import FilterSet, PropertyBundle


def matches(properties: PropertyBundle, value: str, filters: FilterSet) -> bool:
    """Return True when the record satisfies every filter that is set.

    Length bounds are inclusive. ``contains_character`` is checked
    case-sensitively against the value itself.
    """
    if filters.is_palindrome is not None and properties.is_palindrome != filters.is_palindrome:
        return False
    if filters.min_length is not None and properties.length < filters.min_length:
        return False
    if filters.max_length is not None and properties.length > filters.max_length:
        return False
    if filters.word_count is not None and properties.word_count != filters.word_count:
        return False
    if filters.contains_character is not None and filters.contains_character not in value:
        return False
    return True


def record_matches(record, filters: FilterSet) -> bool:
    return matches(record.properties, record.value, filters)
