"""Domain exceptions raised by the directories."""


class DirectoryError(Exception):
    """Base exception for the company/representative directories."""

    def __init__(self, message: str, code: str = "INTERNAL_ERROR", status_code: int = 500):
        self.message = message
        self.code = code
        self.status_code = status_code
        super().__init__(message)


class NotFoundError(DirectoryError):
    """Referenced company or representative does not exist."""

    def __init__(self, message: str):
        super().__init__(message, "NOT_FOUND", 404)


class InvalidStateError(DirectoryError):
    """Operation is not valid for the current association state.

    No dedicated HTTP handler; surfaces through the generic 500 path.
    """

    def __init__(self, message: str):
        super().__init__(message, "INVALID_STATE", 500)
