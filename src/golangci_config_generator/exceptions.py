"""Exceptions raised by golangci-config-generator."""

from __future__ import annotations


class GeneratorError(Exception):
    """Base class for every failure that aborts a generator run."""


class ConfigFileError(GeneratorError):
    """Reading, seeding or writing one of the configuration files failed."""


class LinterCommandError(GeneratorError):
    """The linter command could not be started or exited with an error.

    Attributes:
        returncode: Exit status of the command, or None if it never started.
        stderr: Captured standard error of the command.

    """

    def __init__(
        self, message: str, *, returncode: int | None = None, stderr: str = ""
    ) -> None:
        """Initialize the error.

        Args:
            message: Human readable description, including stderr if any.
            returncode: Exit status of the command, or None if it never started.
            stderr: Captured standard error of the command.

        """
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class TemplateError(GeneratorError):
    """The configuration template could not be parsed or evaluated.

    Attributes:
        line: 1-based line of the offending action, when known.

    """

    def __init__(self, message: str, *, line: int | None = None) -> None:
        """Initialize the error.

        Args:
            message: Description of the problem.
            line: 1-based line of the offending action, when known.

        """
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.line = line
