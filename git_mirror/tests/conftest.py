"""Shared fixtures for the git mirror tests."""

import pytest

from git_mirror.core.config import GitLabProviderConfig


@pytest.fixture
def config():
    return GitLabProviderConfig(url="https://gitlab.example.com", group="mirrors")
