"""
GitLab provider.

Lists every project of a GitLab group and reads each project's description as
a small YAML document telling where the project is mirrored from::

    origin: https://github.com/example/project.git
    skip: false

Projects with an unreadable description, or with ``skip: true``, are left out.
"""

import logging
from typing import Callable, List, Optional
from urllib.parse import quote

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    TypeAdapter,
    ValidationError,
)

from git_mirror.core.config import GitLabProviderConfig
from git_mirror.core.exceptions import (
    ConnectionFailedError,
    DecodeError,
    DescriptionError,
    MalformedPageError,
    PaginationError,
    TransportError,
    UnauthorizedError,
    UnexpectedStatusError,
)
from git_mirror.core.provider import Mirror
from git_mirror.core.transport import GitlabTransport, PageResponse, Transport

# Configure logging
logger = logging.getLogger(__name__)

PER_PAGE = 100
NEXT_PAGE_HEADER = "X-Next-Page"


class Project(BaseModel):
    """A project as returned by ``GET /groups/:id/projects``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    description: str
    web_url: str
    ssh_url: str = Field(alias="ssh_url_to_repo")
    http_url: str = Field(alias="http_url_to_repo")


class Description(BaseModel):
    """Mirror settings stored in a project description."""

    origin: StrictStr
    skip: StrictBool = False


_PROJECT_LIST = TypeAdapter(List[Project])


def decode_page(raw: bytes) -> List[Project]:
    """
    Decode one page of the projects API.

    The whole page is rejected if any element misses a field or has a wrong
    type. Unknown fields are ignored.

    Raises:
        DecodeError: If the body is not a JSON list of projects
    """
    try:
        return _PROJECT_LIST.validate_json(raw)
    except ValidationError as e:
        raise DecodeError(str(e)) from e


def parse_description(text: str) -> Description:
    """
    Parse a project description.

    Raises:
        DescriptionError: If the text is not YAML or lacks ``origin``
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DescriptionError(str(e)) from e

    if not isinstance(data, dict):
        raise DescriptionError(f"expected a mapping, got {type(data).__name__}")

    try:
        return Description.model_validate(data)
    except ValidationError as e:
        raise DescriptionError(str(e)) from e


def interpret(project: Project, use_http: bool) -> Optional[Mirror]:
    """Turn a project into a mirror, or None if it is to be skipped."""
    try:
        desc = parse_description(project.description)
    except DescriptionError as e:
        logger.warning("Skipping %s, Description not valid YAML (%s)", project.web_url, e)
        return None

    if desc.skip:
        logger.warning("Skipping %s, Skip flag set", project.web_url)
        return None

    destination = project.http_url if use_http else project.ssh_url
    logger.debug("%s -> %s", desc.origin, destination)
    return Mirror(origin=desc.origin, destination=destination)


def projects_url(config: GitLabProviderConfig, page: int) -> str:
    """URL of one page of the group's projects."""
    return "%s/api/v4/groups/%s/projects?per_page=%d&page=%d" % (
        config.url,
        quote(config.group, safe=""),
        PER_PAGE,
        page,
    )


def has_next_page(response: PageResponse, url: str) -> bool:
    """
    Tell from the ``X-Next-Page`` header whether another page follows.

    GitLab sends an empty header on the last page, so empty and absent both
    mean "no more pages".

    Raises:
        PaginationError: If the header is present but not a positive integer
    """
    value = response.header(NEXT_PAGE_HEADER)
    if value is None or not value.strip():
        logger.debug("No more pages")
        return False

    try:
        next_page = int(value)
    except ValueError as e:
        raise PaginationError(f"Invalid {NEXT_PAGE_HEADER} header {value!r} for: {url}", url) from e
    if next_page < 1:
        raise PaginationError(f"Invalid {NEXT_PAGE_HEADER} header {value!r} for: {url}", url)

    logger.debug("Next page: %d", next_page)
    return True


def fetch_all_projects(config: GitLabProviderConfig, transport: Transport) -> List[Project]:
    """
    Fetch every project of the configured group, page by page.

    Raises:
        ApiError: On the first page that cannot be fetched or decoded
    """
    projects: List[Project] = []

    for page in range(1, config.max_pages + 1):
        url = projects_url(config, page)
        logger.debug("URL: %s", url)

        try:
            response = transport.get(url)
        except TransportError as e:
            raise ConnectionFailedError(url, e) from e

        if response.status != 200:
            if response.status == 401:
                raise UnauthorizedError(url)
            raise UnexpectedStatusError(response.status, url)

        has_next = has_next_page(response, url)

        try:
            projects.extend(decode_page(response.body))
        except DecodeError as e:
            raise MalformedPageError(url, e) from e

        if not has_next:
            return projects

    raise PaginationError(
        f"Server still announces more pages after {config.max_pages} pages "
        f"for group {config.group}"
    )


class GitLab:
    """Provider reading mirror directives from the projects of a GitLab group."""

    def __init__(
        self,
        config: GitLabProviderConfig,
        transport_factory: Optional[Callable[[GitLabProviderConfig], Transport]] = None,
    ):
        """
        Initialize with provider configuration.

        Args:
            config: Validated provider configuration
            transport_factory: Builds the transport for one call; defaults to
                a python-gitlab backed transport
        """
        self.config = config
        self.transport_factory = transport_factory or default_transport

    def __repr__(self) -> str:
        return "GitLab(url=%r, group=%r, use_http=%r)" % (
            self.config.url,
            self.config.group,
            self.config.use_http,
        )

    def get_mirror_repos(self) -> List[Mirror]:
        """
        Return the mirrors described by the group's projects.

        Raises:
            ApiError: If the project list cannot be fetched completely
        """
        if self.config.token is None:
            logger.debug("GITLAB_PRIVATE_TOKEN not set")

        transport = self.transport_factory(self.config)
        try:
            projects = fetch_all_projects(self.config, transport)
        finally:
            transport.close()
        logger.info("Found %d projects in group %s", len(projects), self.config.group)

        mirrors = []
        for project in projects:
            mirror = interpret(project, self.config.use_http)
            if mirror is not None:
                mirrors.append(mirror)

        return mirrors


def default_transport(config: GitLabProviderConfig) -> Transport:
    """Create the python-gitlab backed transport for ``config``."""
    return GitlabTransport(
        url=config.url,
        private_token=config.token,
        timeout=config.timeout,
        ssl_verify=config.ssl_verify,
    )
