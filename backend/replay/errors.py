"""
Errors raised by the replay query layer.

Both kinds are client mistakes: main.py turns them into a 400 with a short
{"error": message} body. Nothing is retried and the process keeps serving.
"""


class ReplayError(Exception):
    """Base class for request errors surfaced to the caller."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgument(ReplayError):
    """A required parameter is missing or is not an integer."""


class OutOfRange(ReplayError):
    """A well-formed index falls outside [0, length)."""
