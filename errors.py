"""Error taxonomy for the grading API.

Route handlers raise these; ``main`` renders them as ``{"error": message}``
with the matching HTTP status.
"""


class GradebookError(Exception):
    """Base class for errors surfaced directly to the caller."""

    status_code = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidInputError(GradebookError):
    """Missing or out-of-range request fields."""

    status_code = 400


class UnauthorizedError(GradebookError):
    """Bad credentials. Unknown id and wrong password look the same."""

    status_code = 401


class NotFoundError(GradebookError):
    status_code = 404


class ConflictError(GradebookError):
    """Signup with an id that already exists."""

    status_code = 409
