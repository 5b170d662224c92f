"""
Tests for configuration loading and validation.
"""

import pytest
from pydantic import ValidationError

from git_mirror.core.config import (
    DEFAULT_GITLAB_URL,
    GitLabProviderConfig,
    build_config,
    get_env_variable,
    load_config_from_env,
    parse_bool,
)
from git_mirror.core.exceptions import ConfigError

ENV_VARS = ["GITLAB_URL", "GITLAB_GROUP", "GITLAB_USE_HTTP", "GITLAB_PRIVATE_TOKEN", "GITLAB_TIMEOUT"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_url_needs_scheme():
    with pytest.raises(ValidationError):
        GitLabProviderConfig(url="gitlab.com", group="mirrors")


def test_url_trailing_slash_dropped():
    config = GitLabProviderConfig(url="https://gitlab.com/", group="mirrors")

    assert config.url == "https://gitlab.com"


def test_group_must_not_be_empty():
    with pytest.raises(ValidationError):
        GitLabProviderConfig(url="https://gitlab.com", group=" / ")


def test_max_pages_must_be_positive():
    with pytest.raises(ValidationError):
        GitLabProviderConfig(url="https://gitlab.com", group="mirrors", max_pages=0)


def test_config_is_immutable():
    config = GitLabProviderConfig(url="https://gitlab.com", group="mirrors")

    with pytest.raises(ValidationError):
        config.use_http = True


def test_empty_token_means_anonymous():
    config = GitLabProviderConfig(url="https://gitlab.com", group="mirrors", private_token="")

    assert config.token is None


def test_build_config_wraps_validation_errors():
    with pytest.raises(ConfigError, match="Configuration validation error"):
        build_config(url="ftp://gitlab.com", group="mirrors")


def test_build_config_defaults_url():
    config = build_config(url=None, group="mirrors")

    assert config.url == DEFAULT_GITLAB_URL
    assert config.private_token is None


def test_get_env_variable_required(monkeypatch):
    with pytest.raises(ConfigError, match="GITLAB_GROUP"):
        get_env_variable("GITLAB_GROUP", required=True)

    monkeypatch.setenv("GITLAB_GROUP", "mirrors")
    assert get_env_variable("GITLAB_GROUP", required=True) == "mirrors"


@pytest.mark.parametrize(
    "value, expected",
    [("true", True), ("YES", True), ("1", True), ("false", False), ("", False), (None, False)],
)
def test_parse_bool(value, expected):
    assert parse_bool(value) is expected


def test_load_config_from_env(monkeypatch):
    monkeypatch.setenv("GITLAB_URL", "https://gitlab.example.com")
    monkeypatch.setenv("GITLAB_GROUP", "parent/mirrors")
    monkeypatch.setenv("GITLAB_USE_HTTP", "yes")
    monkeypatch.setenv("GITLAB_PRIVATE_TOKEN", "glpat-secret")
    monkeypatch.setenv("GITLAB_TIMEOUT", "12.5")

    config = load_config_from_env()

    assert config.url == "https://gitlab.example.com"
    assert config.group == "parent/mirrors"
    assert config.use_http is True
    assert config.token == "glpat-secret"
    assert config.timeout == 12.5


def test_load_config_from_env_requires_group():
    with pytest.raises(ConfigError):
        load_config_from_env()


def test_load_config_from_env_rejects_bad_timeout(monkeypatch):
    monkeypatch.setenv("GITLAB_GROUP", "mirrors")
    monkeypatch.setenv("GITLAB_TIMEOUT", "soon")

    with pytest.raises(ConfigError, match="GITLAB_TIMEOUT"):
        load_config_from_env()
