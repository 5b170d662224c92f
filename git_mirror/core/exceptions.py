"""
Custom exceptions for the git mirror project.

This module provides a hierarchy of exceptions used throughout the project.
"""

from typing import Optional


class MirrorError(Exception):
    """Base exception for mirroring operations."""


class ConfigError(MirrorError):
    """Configuration related errors."""


class ApiError(MirrorError):
    """GitLab API related errors. Fatal to a whole discovery run."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class ConnectionFailedError(ApiError):
    """A page URL could not be reached (refused, DNS, TLS, timeout)."""

    def __init__(self, url: str, cause: Exception):
        super().__init__(f"Unable to connect to: {url} ({cause})", url)
        self.cause = cause


class UnauthorizedError(ApiError):
    """The API answered 401 Unauthorized."""

    def __init__(self, url: str):
        super().__init__(
            f"API call received unauthorized (401) for: {url}. "
            "Please make sure the `GITLAB_PRIVATE_TOKEN` environment variable is set.",
            url,
        )


class UnexpectedStatusError(ApiError):
    """The API answered with a status other than 200 or 401."""

    def __init__(self, status: int, url: str):
        super().__init__(f"API call received invalid status ({status}) for: {url}", url)
        self.status = status


class MalformedPageError(ApiError):
    """A page body could not be decoded as a list of projects."""

    def __init__(self, url: str, cause: Exception):
        super().__init__(f"Unable to parse response of {url} as JSON ({cause})", url)
        self.cause = cause


class PaginationError(ApiError):
    """Pagination went wrong: page cap exceeded or unreadable X-Next-Page."""


class TransportError(MirrorError):
    """No HTTP response could be obtained from the transport."""


class DecodeError(MirrorError):
    """A page body does not match the project schema."""


class DescriptionError(MirrorError):
    """A project description is not a valid mirror description."""
