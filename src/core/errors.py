from __future__ import annotations


class GitHubLoggerError(Exception):
    """Base error for the chat logger server."""


class ValidationError(GitHubLoggerError):
    """Raised when user input is invalid."""


class ConfigurationError(GitHubLoggerError):
    """Raised when logging has not been configured yet."""


class ExternalServiceError(GitHubLoggerError):
    """Raised when an external service (GitHub/webhook) fails."""


NOT_CONFIGURED_MESSAGE = "GitHub logging not configured. Run setup_github_logging first."
