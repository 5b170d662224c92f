"""Core functionality for the git mirror tool."""

from git_mirror.core.config import (
    GitLabProviderConfig,
    build_config,
    get_env_variable,
    load_config_from_env,
)
from git_mirror.core.exceptions import (
    ApiError,
    ConfigError,
    ConnectionFailedError,
    DecodeError,
    DescriptionError,
    MalformedPageError,
    MirrorError,
    PaginationError,
    TransportError,
    UnauthorizedError,
    UnexpectedStatusError,
)
from git_mirror.core.gitlab_provider import (
    GitLab,
    Project,
    decode_page,
    fetch_all_projects,
    interpret,
)
from git_mirror.core.provider import Mirror, Provider
from git_mirror.core.transport import GitlabTransport, PageResponse, Transport

__all__ = [
    "MirrorError",
    "ConfigError",
    "ApiError",
    "ConnectionFailedError",
    "UnauthorizedError",
    "UnexpectedStatusError",
    "MalformedPageError",
    "PaginationError",
    "TransportError",
    "DecodeError",
    "DescriptionError",
    "GitLabProviderConfig",
    "build_config",
    "get_env_variable",
    "load_config_from_env",
    "GitLab",
    "Project",
    "decode_page",
    "fetch_all_projects",
    "interpret",
    "Mirror",
    "Provider",
    "GitlabTransport",
    "PageResponse",
    "Transport",
]
