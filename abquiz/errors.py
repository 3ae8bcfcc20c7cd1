# abquiz/errors.py
# Every scoring failure is one of these three kinds.


class ScoringError(Exception):
    kind = 'scoring'
    status_code = 500


class ValidationError(ScoringError):
    """Malformed input to the prompt builder. Caller bug, never retried."""
    kind = 'validation'
    status_code = 400


class ServiceError(ScoringError):
    """The model service did not return a usable success response."""
    kind = 'service'
    status_code = 502


class ParseError(ScoringError):
    """The model text could not be coerced into a score object."""
    kind = 'parse'
    status_code = 502
