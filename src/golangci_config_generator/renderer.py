"""Render the configuration template and write the result."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol

from .config_loader import write_file
from .template import Template

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

# Configure logging
logger = logging.getLogger(__name__)


class TemplateRenderer(Protocol):
    """Protocol for template renderers."""

    def render(self, *, bindings: Mapping[str, Any], template: str) -> bytes:
        """Render a template with the given variables.

        Args:
            bindings: Variables available to the template.
            template: Template source.

        Returns:
            The rendered document.

        """
        ...


class GoTemplateRenderer:
    """Render templates written in Go ``text/template`` syntax."""

    def render(self, *, bindings: Mapping[str, Any], template: str) -> bytes:
        """Render a template with the given variables.

        Args:
            bindings: Variables available to the template as ``.Name``.
            template: Template source.

        Returns:
            The rendered document, UTF-8 encoded.

        Raises:
            TemplateError: If the template cannot be parsed or evaluated.

        """
        parsed = Template.parse(template)
        return parsed.execute(bindings).encode("utf-8")


def write_config(*, content: bytes, path: Path) -> None:
    """Replace the generated configuration file.

    Args:
        content: Rendered configuration.
        path: Output file.

    Raises:
        ConfigFileError: If the file cannot be written.

    """
    write_file(content=content, path=path)
    logger.info("Wrote %d bytes to %s", len(content), path)
