"""Read the generator's input files, seeding them with defaults on first run."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .constants import (
    DEFAULT_DISABLED_CONTENT,
    DEFAULT_TEMPLATE_CONTENT,
    FILE_MODE,
)
from .exceptions import ConfigFileError

if TYPE_CHECKING:
    from pathlib import Path

# Configure logging
logger = logging.getLogger(__name__)


def write_file(*, content: bytes, path: Path) -> None:
    """Overwrite a file with the given content.

    The file is created with a permissive mode if it does not exist yet; the
    mode of an existing file is left alone.

    Args:
        content: Bytes to write.
        path: Destination file.

    Raises:
        ConfigFileError: If the file cannot be created or written.

    """
    try:
        path.touch(exist_ok=True, mode=FILE_MODE)
        path.write_bytes(content)
    except OSError as exc:
        msg = f"Failed to write file {path}: {exc}"
        raise ConfigFileError(msg) from exc


def load_or_seed(*, default_content: bytes, path: Path) -> bytes:
    """Return the content of a file, creating it from a default if missing.

    Args:
        default_content: Content written to and returned for a missing file.
        path: File to read.

    Returns:
        The file content, or ``default_content`` if the file was just created.

    Raises:
        ConfigFileError: If the file cannot be inspected, read or created.

    """
    try:
        exists = path.exists()
    except OSError as exc:
        msg = f"Failed to stat file {path}: {exc}"
        raise ConfigFileError(msg) from exc

    if not exists:
        logger.info("Creating %s with default content", path)
        write_file(content=default_content, path=path)
        return default_content

    try:
        return path.read_bytes()
    except OSError as exc:
        msg = f"Failed to read file {path}: {exc}"
        raise ConfigFileError(msg) from exc


def read_disabled_set(*, path: Path) -> frozenset[str]:
    """Read the names of linters that must never be enabled.

    Args:
        path: Disabled list, one linter name per line.

    Returns:
        The stripped, non-empty lines of the file.

    """
    data = load_or_seed(default_content=DEFAULT_DISABLED_CONTENT, path=path)
    text = data.decode("utf-8", errors="replace")
    stripped_lines = (line.strip() for line in text.split("\n"))
    disabled = frozenset(line for line in stripped_lines if line)
    logger.debug("Disabled linters: %s", ", ".join(sorted(disabled)))
    return disabled


def read_template_text(*, path: Path) -> str:
    """Read the configuration template.

    Args:
        path: Template file.

    Returns:
        The template source.

    Raises:
        ConfigFileError: If the template is not valid UTF-8.

    """
    data = load_or_seed(default_content=DEFAULT_TEMPLATE_CONTENT, path=path)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        msg = f"Template {path} is not valid UTF-8: {exc}"
        raise ConfigFileError(msg) from exc
