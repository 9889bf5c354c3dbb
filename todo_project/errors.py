class TodoError(Exception):
    """Base error for todo operations. Carries the message sent to clients."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TodoError):
    status_code = 400


class NotFoundError(TodoError):
    status_code = 404
