"""Extract the list of available linters from golangci-lint."""

from __future__ import annotations

import logging
import subprocess
from typing import Protocol

from .constants import GOLANGCI_LINT_EXECUTABLE, LINTERS_SUBCOMMAND, STATUS_MARKERS
from .exceptions import LinterCommandError

# Configure logging
logger = logging.getLogger(__name__)


class LinterSource(Protocol):
    """Protocol for anything that can list linter names."""

    def list_linters(self) -> list[str]:
        """Get the available linter names.

        Returns:
            Sorted list of unique linter names.

        """
        ...


def parse_linters_output(*, output: str) -> list[str]:
    """Parse the output of ``golangci-lint linters`` into linter names.

    Each line looks like ``errcheck: Errcheck is a program ... [fast]``. The
    name is the text before the first colon, cut at the first space. Group
    headers such as ``Enabled by default linters:`` are skipped because their
    first word contains a status marker.

    Args:
        output: Standard output of the linters command.

    Returns:
        Unique linter names in ascending order.

    Examples:
        >>> parse_linters_output(output="foo: desc\\nEnabled by default:\\nbar:x\\n")
        ['bar', 'foo']

    """
    linters: set[str] = set()

    for line in output.split("\n"):
        name = line.split(":", 1)[0].split(" ", 1)[0]

        if not name:
            continue

        if any(marker in name for marker in STATUS_MARKERS):
            logger.debug("Skipping header line: %s", line)
            continue

        logger.debug("Found linter: %s", name)
        linters.add(name)

    return sorted(linters)


class GolangciLintExtractor:
    """List linters by running ``golangci-lint linters``."""

    def __init__(self, *, executable: str = GOLANGCI_LINT_EXECUTABLE) -> None:
        """Initialize the extractor.

        Args:
            executable: Name or path of the golangci-lint binary.

        """
        self.executable = executable

    @property
    def command(self) -> list[str]:
        """Command line used to list the linters.

        Returns:
            The executable followed by the linters subcommand.

        """
        return [self.executable, LINTERS_SUBCOMMAND]

    def list_linters(self) -> list[str]:
        """Run golangci-lint and parse the linters it reports.

        Returns:
            Unique linter names in ascending order.

        Raises:
            LinterCommandError: If the command cannot be started or fails.

        """
        logger.info("Extracting linters from '%s'", " ".join(self.command))

        try:
            result = subprocess.run(
                self.command,
                capture_output=True,
                check=True,
                text=True,
            )
        except subprocess.CalledProcessError as exc:
            stderr = exc.stderr or ""
            msg = (
                f"'{' '.join(self.command)}' exited with status "
                f"{exc.returncode}: {stderr.strip()}"
            )
            raise LinterCommandError(
                msg, returncode=exc.returncode, stderr=stderr
            ) from exc
        except OSError as exc:
            msg = f"Failed to run '{' '.join(self.command)}': {exc}"
            raise LinterCommandError(msg) from exc

        linters = parse_linters_output(output=result.stdout)
        logger.info("Found %d linters", len(linters))
        return linters
