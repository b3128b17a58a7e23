"""Error types mapped to HTTP responses by the handlers registered in main."""

from fastapi import status


class ApiError(Exception):
    """Known failure with an HTTP status and a message safe to show the caller."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ApiError):
    """Missing id or required field, or a malformed value."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthError(ApiError):
    """Bad credentials or a missing, invalid or unknown token."""

    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND


class TranslationProviderError(Exception):
    """Raised by a translation provider. Never leaves the orchestrator."""

    def __init__(self, target_language: str, reason: str) -> None:
        super().__init__(f"Failed to translate to '{target_language}': {reason}")
        self.target_language = target_language
        self.reason = reason
