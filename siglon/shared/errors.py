class SiglonError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(SiglonError):
    status_code = 404


class InvalidState(SiglonError):
    status_code = 409


class WriteFailure(SiglonError):
    """The underlying store rejected an insert, update or delete."""

    status_code = 502


class ConfigurationError(SiglonError):
    status_code = 503
