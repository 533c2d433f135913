"""
Exception hierarchy for the translation services.

Every error raised by this package derives from TranslationError, which
carries a human-readable message, a context dictionary and a flag telling
whether the failure can potentially be recovered from.
"""

from typing import Optional, Dict, Any, List


class TranslationError(Exception):
    """Base exception for all translation-related errors.

    Attributes:
        message: Human-readable error message
        context: Additional context about the error
        recoverable: Whether the error can potentially be recovered from
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        recoverable: bool = False
    ):
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.recoverable = recoverable

    def __str__(self) -> str:
        base = f"{self.__class__.__name__}: {self.message}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base += f" (context: {context_str})"
        return base


# ============================================================================
# Configuration errors
# ============================================================================

class ConfigurationError(TranslationError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, context, recoverable=False)


class ServiceNotInitializedError(ConfigurationError):
    """Raised when a service is used before initialize() completed."""
    pass


# ============================================================================
# Provider errors
# ============================================================================

class ProviderError(TranslationError):
    """Raised when the provider answers with a non-success response.

    Attributes:
        status_code: HTTP status of the response
        status_text: Reason phrase of the response
        body: Response body, empty string when there was none
    """

    EMPTY_BODY = "Empty body"

    def __init__(
        self,
        status_code: int,
        status_text: str = "",
        body: str = "",
        context: Optional[Dict[str, Any]] = None,
        recoverable: bool = False
    ):
        self.status_code = status_code
        self.status_text = status_text
        self.body = body
        message = f"[{status_code} {status_text}]: {body or self.EMPTY_BODY}"
        super().__init__(message, context, recoverable)


class CapabilityFetchError(ProviderError):
    """Raised when the provider's language catalog cannot be retrieved."""
    pass


class RateLimitedError(ProviderError):
    """Raised when the provider keeps rejecting requests as rate limited.

    Rate limiting is transient, so the error is retried automatically. Once
    the retry budget is exhausted it is terminal.

    Attributes:
        attempts: Number of requests made before giving up
    """

    def __init__(
        self,
        status_code: int,
        status_text: str = "",
        body: str = "",
        attempts: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        ctx = context or {}
        if attempts is not None:
            ctx['attempts'] = attempts
        super().__init__(status_code, status_text, body, ctx, recoverable=False)
        self.attempts = attempts


class ProviderResponseError(ProviderError):
    """Raised when a success response does not contain a usable translation."""
    pass


# ============================================================================
# Placeholder errors
# ============================================================================

class PlaceholderIntegrityError(TranslationError):
    """Raised when protected fragments cannot be put back into a translation.

    Extraction and reinsertion are paired, so this indicates a defect or a
    provider that dropped a marker.

    Attributes:
        expected_count: Number of markers that should be present
        missing_markers: Markers that were not found
    """

    def __init__(
        self,
        message: str,
        expected_count: Optional[int] = None,
        missing_markers: Optional[List[str]] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        ctx = context or {}
        if expected_count is not None:
            ctx['expected_count'] = expected_count
        if missing_markers:
            ctx['missing_markers'] = missing_markers
        super().__init__(message, ctx, recoverable=False)
        self.expected_count = expected_count
        self.missing_markers = missing_markers or []
