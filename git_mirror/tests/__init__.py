"""Tests for the git mirror tool."""
