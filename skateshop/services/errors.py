"""
Domain errors raised by the add-product services.
"""

from typing import Optional


class SubmissionError(Exception):
    """Base exception for the add-product flow."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class StagingError(SubmissionError):
    """A file could not be staged (count, size or type limits)."""


class UploadError(SubmissionError):
    """The upload service failed; the whole batch is considered lost."""


class MutationError(SubmissionError):
    """The product creation mutation reported an error."""
