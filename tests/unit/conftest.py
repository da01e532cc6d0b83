"""
Unit test configuration for dotclaude.

Keeps tests away from the user's real config and provides a fake git.
"""

import logging

import pytest

from dotclaude import config
from dotclaude.git_status import GitStatus


class FakeGit:
    """GitInterface double that counts calls."""

    def __init__(self, status=None, work_tree=True):
        self.status = status or GitStatus(branch="main")
        self.work_tree = work_tree
        self.work_tree_calls = 0
        self.query_calls = 0

    def is_work_tree(self, directory: str) -> bool:
        self.work_tree_calls += 1
        return self.work_tree

    def query_status(self, directory: str) -> GitStatus:
        self.query_calls += 1
        return self.status


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point CONFIG_PATH and dotclaude dirs at a temp location."""
    monkeypatch.setattr(config, "CONFIG_PATH", tmp_path / "dotclaude" / "config.yaml")
    monkeypatch.setenv("DOTCLAUDE_DIR", str(tmp_path / "dotclaude"))
    monkeypatch.setenv("CLAUDE_CONFIG_DIR", str(tmp_path / "claude"))
    monkeypatch.delenv("DOTCLAUDE_DEBUG", raising=False)
    yield


@pytest.fixture(autouse=True)
def reset_dotclaude_logging():
    """Drop handlers a test installed on the dotclaude logger."""
    yield
    logger = logging.getLogger("dotclaude")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def fake_git():
    return FakeGit()


@pytest.fixture
def make_fake_git():
    """Factory for FakeGit with a custom status or work-tree answer."""
    return FakeGit
