class StringAnalyzerError(Exception):
    """Base class for every error the string analyzer raises on purpose."""


class MissingFieldError(StringAnalyzerError):
    def __init__(self, field):
        self.field = field
        super().__init__(f"Missing required field '{field}'.")


class TypeMismatchError(StringAnalyzerError):
    def __init__(self, field, expected):
        self.field = field
        self.expected = expected
        super().__init__(f"Field '{field}' must be a {expected}.")


class ConflictError(StringAnalyzerError):
    pass


class DuplicateValueError(ConflictError):
    def __init__(self, value):
        self.value = value
        super().__init__("String already exists.")


class ConflictingFiltersError(ConflictError):
    """Raised when parsed length bounds cannot be satisfied together."""

    def __init__(self, message, filters=None):
        self.filters = filters
        super().__init__(message)


class NotFoundError(StringAnalyzerError):
    def __init__(self, value):
        self.value = value
        super().__init__("String not found.")


class UnparseableQueryError(StringAnalyzerError):
    def __init__(self, query):
        self.query = query
        super().__init__("Unable to parse natural language query.")


class InvalidFilterValueError(StringAnalyzerError):
    """Raised when a raw query-parameter filter cannot be coerced.

    ``errors`` maps each offending field to its list of messages, in the
    shape DRF serializers report them.
    """

    def __init__(self, errors):
        self.errors = errors
        super().__init__("Invalid filter value.")
