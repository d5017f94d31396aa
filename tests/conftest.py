"""Shared fixtures for xfercheck tests."""

import pytest
from click.testing import CliRunner

from xfercheck.shape import HostCapabilities


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def posix_host():
    return HostCapabilities(preserves_permissions=True)


@pytest.fixture
def windows_host():
    return HostCapabilities(preserves_permissions=False)


@pytest.fixture
def local_tree(tmp_path):
    """Local files for CLI tests.

    Tree:
        a.txt, b.txt,
        data/x.txt, data/logs/app.log,
        backup/
    """
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / "b.txt").write_text("b")
    data = tmp_path / "data"
    data.mkdir()
    (data / "x.txt").write_text("x")
    logs = data / "logs"
    logs.mkdir()
    (logs / "app.log").write_text("log")
    (tmp_path / "backup").mkdir()
    return tmp_path
