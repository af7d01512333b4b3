"""
Error taxonomy for the study assistant.

Every error carries a human-readable message that is shown to the user as-is.
"""


class StudyAssistantError(Exception):
    """Base class for all user-facing study assistant errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ConfigurationError(StudyAssistantError):
    """Raised when the API credential is not configured."""


class ServiceError(StudyAssistantError):
    """Raised when the AI content service fails or returns unusable output."""


class ValidationError(StudyAssistantError):
    """Raised when the subject or topic entered by the user is empty."""
