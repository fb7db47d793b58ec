"""
Pytest configuration and shared fixtures for xgokit tests.
"""

import subprocess
from typing import List
from unittest.mock import Mock, patch

import pytest


class FakeRuntime:
    """
    Stand-in for the container runtime binary.

    Replaces ``subprocess.run`` and answers by subcommand. Every call is
    recorded so tests can assert on ordering and arguments.
    """

    def __init__(self):
        self.calls: List[List[str]] = []
        self.images_output = "REPOSITORY   TAG   IMAGE ID\n"
        self.failures = {}
        self.missing_binary = False

    def add_image(self, image: str):
        self.images_output += f"{image}   latest   sha256:0123\n"

    def fail(self, subcommand: str, returncode: int = 1):
        self.failures[subcommand] = returncode

    def subcommands(self) -> List[str]:
        return [call[1] for call in self.calls]

    def __call__(self, cmd, **kwargs):
        self.calls.append(list(cmd))
        if self.missing_binary:
            raise FileNotFoundError(2, "No such file or directory", cmd[0])

        subcommand = cmd[1]
        if subcommand in self.failures:
            raise subprocess.CalledProcessError(self.failures[subcommand], cmd)

        stdout = self.images_output if subcommand == "images" else None
        return Mock(returncode=0, stdout=stdout)


@pytest.fixture
def fake_runtime():
    """Patch subprocess.run with a FakeRuntime."""
    runtime = FakeRuntime()
    with patch("subprocess.run", side_effect=runtime):
        yield runtime


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test from an empty working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
