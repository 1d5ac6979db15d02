import logging

from .errors import (
    InvalidFilterValueError,
    MissingFieldError,
    NotFoundError,
    UnparseableQueryError,
)
from .models import FilterSet
from .nlp import parse_natural_language_query
from .serializers import StringAnalyzeSerializer, StringFilterSerializer

logger = logging.getLogger(__name__)


def create_string(repository, data):
    """
    Analyze ``data['value']`` and store it as a new record.

    Raises MissingFieldError, TypeMismatchError or DuplicateValueError;
    the repository is left untouched in every failure case.
    """
    if data is None:
        raise MissingFieldError('value')
    serializer = StringAnalyzeSerializer(data=data, context={'repository': repository})
    serializer.is_valid(raise_exception=True)
    record = serializer.save()
    logger.info("Stored string id=%s length=%d", record.id, record.properties.length)
    return record


def get_string(repository, value):
    record = repository.find_by_value(value)
    if record is None:
        raise NotFoundError(value)
    return record


def list_strings(repository, raw_filters):
    """
    Return ``(records, filters)`` for the records matching the raw
    query-parameter filters. Unknown parameters are ignored.
    """
    serializer = StringFilterSerializer(data=dict(raw_filters))
    if not serializer.is_valid():
        logger.info("Rejected filters %s: %s", dict(raw_filters), serializer.errors)
        raise InvalidFilterValueError(serializer.errors)

    filters = FilterSet.from_dict(serializer.validated_data)
    return repository.find_all(filters), filters


def filter_by_natural_language(repository, query):
    """
    Parse ``query`` into filters and return ``(records, filters)``.

    ConflictingFiltersError from the parser propagates unchanged.
    """
    if query is None or not query.strip():
        raise MissingFieldError('query')

    filters = parse_natural_language_query(query)
    if filters.is_empty():
        raise UnparseableQueryError(query)

    logger.debug("Query %r parsed to %s", query, filters.as_dict())
    return repository.find_all(filters), filters


def delete_string(repository, value):
    if not repository.delete_by_value(value):
        raise NotFoundError(value)
    logger.info("Deleted string %r", value)
