"""
Pytest configuration for dotclaude tests.

This module provides shared fixtures and configuration for all tests.
"""

import shutil

import pytest

from helpers import git


def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line(
        "markers", "requires_git: mark test as requiring the git binary"
    )


def pytest_collection_modifyitems(config, items):
    """Skip git-backed tests when git is not installed."""
    if shutil.which("git"):
        return
    skip_git = pytest.mark.skip(reason="git not installed or not in PATH")
    for item in items:
        if "requires_git" in item.keywords:
            item.add_marker(skip_git)


@pytest.fixture
def git_repo(tmp_path):
    """A git repository on branch 'main' with one commit."""
    repo = tmp_path / "repo"
    repo.mkdir()
    git(repo, "init", "-q")
    git(repo, "symbolic-ref", "HEAD", "refs/heads/main")
    (repo / "README.md").write_text("hello\n")
    git(repo, "add", "README.md")
    git(repo, "commit", "-q", "-m", "initial")
    return repo
