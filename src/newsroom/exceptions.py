"""
Exception hierarchy for Newsroom.

All errors are request-scoped: the API layer turns them into HTTP
responses and nothing here is fatal to the process.
"""


class NewsroomError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(NewsroomError):
    """An article, category, language or channel does not exist."""


class InvalidReferenceError(NewsroomError):
    """A create request references a category or language that does not exist."""
