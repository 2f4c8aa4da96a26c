class AppError(Exception):
    """Base class for errors that are turned into a JSON error response."""

    status_code = 500
    kind = "error"

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {"error": self.message, "kind": self.kind}


class ParseError(AppError):
    """The uploaded CSV could not be read or decoded."""

    kind = "parse_error"


class SummarizationError(AppError):
    """The summarization provider failed or returned an unexpected body."""

    kind = "summarization_error"


class SummarizationTimeout(SummarizationError):
    kind = "summarization_timeout"


class ValidationError(AppError):
    """A required request field is missing or invalid."""

    status_code = 400
    kind = "validation_error"
