from enum import Enum


class ErrorKind(str, Enum):
    INVALID_INPUT = "invalid_input"
    ALREADY_EXISTS = "already_exists"
    NOT_FOUND = "not_found"
    CONFLICTING_FILTERS = "conflicting_filters"
    UNTRANSLATABLE = "untranslatable"


class StringAnalyzerError(Exception):
    """Base error for the string store, filter engine and query translator."""
    kind = None
    default_message = "String analyzer error."

    def __init__(self, message=None, **context):
        self.message = message or self.default_message
        self.context = context
        super().__init__(self.message)


class InvalidInput(StringAnalyzerError):
    kind = ErrorKind.INVALID_INPUT
    default_message = 'Invalid value: "value" must be a non-empty string.'


class AlreadyExists(StringAnalyzerError):
    kind = ErrorKind.ALREADY_EXISTS
    default_message = "String already exists."


class NotFound(StringAnalyzerError):
    kind = ErrorKind.NOT_FOUND
    default_message = "String not found."


class ConflictingFilters(StringAnalyzerError):
    kind = ErrorKind.CONFLICTING_FILTERS
    default_message = "Conflicting filters detected: min_length cannot be greater than max_length."


class Untranslatable(StringAnalyzerError):
    kind = ErrorKind.UNTRANSLATABLE
    default_message = "Unable to parse natural language query."
