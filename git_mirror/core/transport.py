"""
HTTP transport used to fetch pages from the GitLab API.

The provider only needs one thing from the network: GET a URL and hand back
status, headers and body. Which HTTP and TLS stack does this is a deployment
choice, so it sits behind the :class:`Transport` protocol. The default
:class:`GitlabTransport` goes through python-gitlab.
"""

import logging
from dataclasses import dataclass, field
from typing import Mapping, Optional, Protocol

import gitlab
import requests
from gitlab.exceptions import GitlabError
from requests.structures import CaseInsensitiveDict

from git_mirror.core.exceptions import TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageResponse:
    """Status, headers and raw body of one HTTP response."""

    status: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""

    def header(self, name: str) -> Optional[str]:
        """Case-insensitive header lookup."""
        return CaseInsensitiveDict(self.headers).get(name)


class Transport(Protocol):
    """Performs blocking GET requests."""

    def get(self, url: str) -> PageResponse:
        """
        GET ``url`` and return the response whatever its status.

        Raises:
            TransportError: If no response could be obtained
        """
        ...

    def close(self) -> None:
        """Release connections held by the transport."""
        ...


class GitlabTransport:
    """Transport built on python-gitlab's HTTP layer."""

    def __init__(
        self,
        url: str,
        private_token: Optional[str] = None,
        timeout: Optional[float] = None,
        ssl_verify: bool = True,
    ):
        """
        Initialize the underlying GitLab client.

        Args:
            url: GitLab base URL
            private_token: Token sent as ``PRIVATE-TOKEN``, None for anonymous access
            timeout: Connect/read timeout in seconds
            ssl_verify: Whether to verify the server certificate
        """
        self.client = gitlab.Gitlab(
            url=url,
            private_token=private_token,
            timeout=timeout,
            ssl_verify=ssl_verify,
            retry_transient_errors=False,
        )

    def get(self, url: str) -> PageResponse:
        try:
            response = self.client.http_request(
                "get",
                url,
                obey_rate_limit=False,
                retry_transient_errors=False,
                max_retries=0,
            )
        except GitlabError as e:
            # python-gitlab raises on non-2xx; the status is the caller's business
            if e.response_code is None:
                raise TransportError(str(e)) from e
            body = e.response_body if isinstance(e.response_body, bytes) else b""
            return PageResponse(status=e.response_code, body=body)
        except requests.exceptions.RequestException as e:
            raise TransportError(str(e)) from e

        return PageResponse(
            status=response.status_code,
            headers=dict(response.headers),
            body=response.content,
        )

    def close(self) -> None:
        self.client.session.close()
