"""Discover repository mirrors from the project descriptions of a GitLab group."""

__version__ = "1.0.0"
