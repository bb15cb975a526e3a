"""
Error types for Token Studio storage, mutation, and configuration.

Parse failures in the field editor and gaps in persisted documents are
recovered internally and never raised; only the conditions a caller can
act on are represented here.
"""

from __future__ import annotations


class TokenStudioError(Exception):
    """Base exception for all Token Studio errors."""

    def __init__(self, message: str, context: str | None = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context}: {self.message}"
        return self.message

    def __str__(self) -> str:
        return self._format_message()


class StoreUnavailableError(TokenStudioError):
    """
    Raised when the document store cannot be read or written.

    The in-memory working tree is still correct when this is raised; callers
    use it to show degraded-mode messaging.
    """

    def __init__(self, message: str, *, operation: str = "", doc_id: str | None = None):
        self.operation = operation
        self.doc_id = doc_id
        context = f"{operation} {doc_id}" if doc_id else operation or None
        super().__init__(message, context)


class ConfigNotFoundError(TokenStudioError, KeyError):
    """Raised when a saved configuration id does not exist."""

    def __init__(self, config_id: str):
        self.config_id = config_id
        super().__init__(f"Saved configuration not found: {config_id!r}")


class TokenPathError(TokenStudioError, KeyError):
    """Raised when a mutation path does not address a token field."""

    def __init__(self, path: str, reason: str = "unknown path"):
        self.path = path
        super().__init__(reason, context=path)


class TokenValueError(TokenStudioError, ValueError):
    """Raised when a mutation value does not fit the token schema."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(reason, context=path)


class ManifestError(TokenStudioError):
    """Raised when token-studio.toml cannot be read or has invalid values."""

    pass


class TokenDocumentError(TokenStudioError, ValueError):
    """Raised when an imported token file cannot be parsed at all."""

    pass
