"""Pipeline that turns the linter list into a golangci-lint configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .config_loader import read_disabled_set, read_template_text
from .constants import DISABLED_FILE, LINTER_LIST_VARIABLE, OUTPUT_FILE, TEMPLATE_FILE
from .exceptions import ConfigFileError, LinterCommandError, TemplateError
from .linter_extractor import GolangciLintExtractor
from .linter_filter import filter_linters
from .renderer import GoTemplateRenderer, write_config

if TYPE_CHECKING:
    from pathlib import Path

    from .linter_extractor import LinterSource
    from .renderer import TemplateRenderer

# Configure logging
logger = logging.getLogger(__name__)


@dataclass
class GeneratorPaths:
    """Files used by a generator run.

    Attributes:
        disabled_file: List of linters to leave out, seeded if missing.
        output_file: Generated configuration, overwritten on every run.
        template_file: Configuration template, seeded if missing.

    """

    disabled_file: Path = DISABLED_FILE
    output_file: Path = OUTPUT_FILE
    template_file: Path = TEMPLATE_FILE

    @classmethod
    def in_directory(cls, directory: Path) -> GeneratorPaths:
        """Build the default file names relative to a directory.

        Args:
            directory: Directory holding all three files.

        Returns:
            GeneratorPaths instance.

        """
        return cls(
            disabled_file=directory / DISABLED_FILE,
            output_file=directory / OUTPUT_FILE,
            template_file=directory / TEMPLATE_FILE,
        )


@dataclass
class ConfigGenerator:
    """Load inputs, list linters, filter them and render the configuration.

    Attributes:
        paths: Input and output files.
        renderer: Template renderer.
        source: Provider of the full linter list.

    """

    paths: GeneratorPaths = field(default_factory=GeneratorPaths)
    renderer: TemplateRenderer = field(default_factory=GoTemplateRenderer)
    source: LinterSource = field(default_factory=GolangciLintExtractor)

    def generate(self, *, dry_run: bool = False) -> bytes:
        """Run the whole pipeline.

        Args:
            dry_run: Render without writing the output file. Missing input
                files are still seeded.

        Returns:
            The rendered configuration.

        Raises:
            ConfigFileError: If an input or output file cannot be handled.
            LinterCommandError: If the linter list cannot be fetched.
            TemplateError: If the template cannot be rendered.

        """
        try:
            disabled = read_disabled_set(path=self.paths.disabled_file)
        except ConfigFileError as exc:
            msg = f"Failed to read disabled list: {exc}"
            raise ConfigFileError(msg) from exc

        try:
            template = read_template_text(path=self.paths.template_file)
        except ConfigFileError as exc:
            msg = f"Failed to read template: {exc}"
            raise ConfigFileError(msg) from exc

        try:
            linters = self.source.list_linters()
        except LinterCommandError as exc:
            msg = f"Failed to fetch linter list: {exc}"
            raise LinterCommandError(
                msg, returncode=exc.returncode, stderr=exc.stderr
            ) from exc

        enabled = filter_linters(disabled=disabled, linters=linters)
        logger.info(
            "Enabling %d of %d linters (%d disabled)",
            len(enabled),
            len(linters),
            len(linters) - len(enabled),
        )

        try:
            content = self.renderer.render(
                bindings={LINTER_LIST_VARIABLE: enabled}, template=template
            )
        except TemplateError as exc:
            msg = f"Failed to render configuration: {exc}"
            error = TemplateError(msg)
            error.line = exc.line
            raise error from exc

        if dry_run:
            logger.info("Dry run, not writing %s", self.paths.output_file)
            return content

        try:
            write_config(content=content, path=self.paths.output_file)
        except ConfigFileError as exc:
            msg = f"Failed to write configuration: {exc}"
            raise ConfigFileError(msg) from exc

        return content
