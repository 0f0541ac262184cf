class FileReadingError(Exception):
    """Raised when there is an error reading an input file."""

    pass


class FileContentError(Exception):
    """Raised when the content of an input file is not as expected."""

    pass


class ValueRangeError(Exception):
    """Raised when a planning variable holds a value outside its declared value range."""

    pass


class ScoreProtocolError(Exception):
    """Raised when the before/after notifications reach a score calculator out of order.

    The running aggregates can no longer be trusted after this, so callers must
    not try to recover from it.
    """


class ScoreCorruptionError(Exception):
    """Raised when the incremental score differs from the score calculated from scratch."""


class ScoreParseError(Exception):
    """Raised when a score string cannot be parsed."""

    pass


# Mapping of custom exceptions to HTTP status codes
CUSTOM_ERRORS = {
    FileReadingError: 500,
    FileContentError: 400,
    ValueRangeError: 400,
    ScoreParseError: 400,
    ScoreProtocolError: 500,
    ScoreCorruptionError: 500,
}
