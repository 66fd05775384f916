"""Pytest configuration and shared fixtures for golangci-config-generator tests."""

from __future__ import annotations

import subprocess
from typing import TYPE_CHECKING

import pytest

from golangci_config_generator.generator import GeneratorPaths

if TYPE_CHECKING:
    from pathlib import Path


class MockSubprocessResult:
    """Mock subprocess result object."""

    def __init__(self, *, returncode: int = 0, stderr: str = "", stdout: str) -> None:
        """Initialize with stdout string.

        Args:
            returncode: The return code.
            stderr: The subprocess stderr as string.
            stdout: The subprocess stdout as string.

        """
        self.stdout = stdout
        self.returncode = returncode
        self.stderr = stderr


@pytest.fixture(name="mock_golangci_output")
def _mock_golangci_output() -> str:
    """Mock ``golangci-lint linters`` output for tests.

    Returns:
        Output grouped under enabled and disabled headers, as the real tool
        prints it.

    """
    return """Enabled by default linters:
errcheck: errcheck is a program for checking for unchecked errors in Go code. [fast: false, auto-fix: false]
govet (vet, vetshadow): Vet examines Go source code and reports suspicious constructs [fast: false, auto-fix: false]
ineffassign: Detects when assignments to existing variables are not used [fast: true, auto-fix: false]
staticcheck (megacheck): It's a set of rules from staticcheck. [fast: false, auto-fix: false]
unused (megacheck): Checks Go code for unused constants, variables, functions and types [fast: false, auto-fix: false]

Disabled by default linters:
bodyclose: checks whether HTTP response body is closed successfully [fast: false, auto-fix: false]
asciicheck: Simple linter to check that your code does not contain non-ASCII identifiers [fast: true, auto-fix: false]
golint [deprecated]: Golint differs from gofmt. Gofmt reformats Go source code [fast: false, auto-fix: false]
"""


@pytest.fixture(name="mocked_subprocess")
def _mocked_subprocess(
    *,
    mock_golangci_output: str,
    monkeypatch: pytest.MonkeyPatch,
) -> list[list[str]]:
    """Replace subprocess.run with one that answers like golangci-lint.

    Args:
        mock_golangci_output: Mock golangci-lint output.
        monkeypatch: Pytest monkeypatch fixture for mocking.

    Returns:
        List collecting every command passed to subprocess.run.

    """
    commands: list[list[str]] = []

    def mock_subprocess_run(*args: object, **_kwargs: object) -> MockSubprocessResult:
        command = args[0]
        assert isinstance(command, list)
        commands.append(command)
        return MockSubprocessResult(stdout=mock_golangci_output)

    monkeypatch.setattr("subprocess.run", mock_subprocess_run)
    return commands


@pytest.fixture(name="failing_subprocess")
def _failing_subprocess(monkeypatch: pytest.MonkeyPatch) -> None:
    """Replace subprocess.run with one that fails like a broken golangci-lint.

    Args:
        monkeypatch: Pytest monkeypatch fixture for mocking.

    """

    def mock_subprocess_run(*args: object, **_kwargs: object) -> None:
        raise subprocess.CalledProcessError(
            cmd=args[0],
            output="",
            returncode=3,
            stderr="level=error msg=\"can't load config\"\n",
        )

    monkeypatch.setattr("subprocess.run", mock_subprocess_run)


@pytest.fixture(name="paths")
def _paths(tmp_path: Path) -> GeneratorPaths:
    """Generator paths inside a temporary directory.

    Args:
        tmp_path: Pytest temporary directory.

    Returns:
        GeneratorPaths rooted at tmp_path.

    """
    return GeneratorPaths.in_directory(tmp_path)
