"""Custom exceptions for antisync services."""


class ApiError(Exception):
    """Raised when the antiblog API request fails.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code, if a response was received
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ApiForbiddenError(ApiError):
    """Raised when the API rejects the request (HTTP 403, usually a bad API key).

    The message is the response body, which explains the rejection.
    """

    def __init__(self, message: str):
        super().__init__(message, status_code=403)


class FileModifiedError(Exception):
    """Raised when a file is modified during an atomic write operation.

    Attributes:
        path: Path to the file that was modified
        message: Human-readable error message
    """

    def __init__(self, path: str, message: str = "File was modified during write operation"):
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")
