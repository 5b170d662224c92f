"""
Command-line implementation for the list command.

This module lists the mirrors described by the projects of a GitLab group
and optionally exports them to a CSV file.
"""

import logging
from pathlib import Path
from typing import List, Optional

import pandas as pd

from git_mirror.core.config import build_config
from git_mirror.core.gitlab_provider import GitLab
from git_mirror.core.provider import Mirror

logger = logging.getLogger(__name__)


def export_mirrors(mirrors: List[Mirror], output: Path) -> None:
    """Write mirrors to ``output`` as CSV with ``origin,destination`` columns."""
    df = pd.DataFrame(
        [(m.origin, m.destination) for m in mirrors], columns=["origin", "destination"]
    )
    df.to_csv(output, index=False)
    logger.info("Exported %d mirrors to %s", len(mirrors), output)


def list_command(
    url: str,
    group: str,
    use_http: bool = False,
    private_token: Optional[str] = None,
    timeout: Optional[float] = None,
    output: Optional[str] = None,
) -> List[Mirror]:
    """
    List the mirrors of a GitLab group.

    Every project of the group whose description is a YAML document with an
    ``origin`` key becomes one mirror, from that origin to the project's clone
    URL (SSH by default, HTTP with ``use_http``).

    Description example:
        origin: https://github.com/example/project.git
        skip: false

    Args:
        url: URL of the GitLab instance (e.g., "https://gitlab.com")
        group: Group path or id whose projects are scanned
        use_http: Use HTTP clone URLs as destinations
        private_token: API token, None for anonymous access
        timeout: Request timeout in seconds
        output: Optional CSV file to write the mirrors to

    Returns:
        The discovered mirrors

    Raises:
        ConfigError: If configuration is invalid
        ApiError: If the group's projects cannot be listed
    """
    config = build_config(
        url=url,
        group=group,
        use_http=use_http,
        private_token=private_token,
        timeout=timeout,
    )

    provider = GitLab(config)
    mirrors = provider.get_mirror_repos()

    for mirror in mirrors:
        print(mirror)

    print("\n===== MIRROR SUMMARY =====")
    print(f"Group: {config.group}")
    print(f"Mirrors found: {len(mirrors)}")

    if output:
        export_mirrors(mirrors, Path(output))

    return mirrors
