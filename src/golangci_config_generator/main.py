"""Main module for golangci-config-generator application."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .constants import (
    DISABLED_FILE,
    GOLANGCI_LINT_EXECUTABLE,
    OUTPUT_FILE,
    TEMPLATE_FILE,
)
from .exceptions import GeneratorError
from .generator import ConfigGenerator, GeneratorPaths
from .linter_extractor import GolangciLintExtractor
from .renderer import GoTemplateRenderer

# Configure logging
logger = logging.getLogger(__name__)


class Application:
    """Main application class for golangci-config-generator.

    Builds the generator from the parsed command line and turns its outcome
    into an exit code.
    """

    def __init__(self, *, args: argparse.Namespace) -> None:
        """Initialize the application with parsed command line arguments.

        Args:
            args: Parsed command line arguments from argparse.

        """
        self.args = args
        self.paths = GeneratorPaths(
            disabled_file=args.disabled_file,
            output_file=args.output_file,
            template_file=args.template_file,
        )
        self._generator: ConfigGenerator | None = None

    @property
    def generator(self) -> ConfigGenerator:
        """Get the config generator instance.

        Returns:
            ConfigGenerator wired with the golangci-lint extractor.

        """
        if self._generator is None:
            self._generator = ConfigGenerator(
                paths=self.paths,
                renderer=GoTemplateRenderer(),
                source=GolangciLintExtractor(executable=self.args.executable),
            )

        return self._generator

    def run(self) -> int:
        """Run the application with the provided arguments.

        Returns:
            Exit code (0 for success, non-zero for failure).

        """
        try:
            content = self.generator.generate(dry_run=self.args.dry_run)
            if self.args.dry_run:
                sys.stdout.write(content.decode("utf-8"))
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130
        except GeneratorError as exc:
            logger.error("%s", exc)  # noqa: TRY400
            return 1
        except Exception:
            logger.exception("Unexpected error occurred")
            return 1

        return 0


def _setup_logging(*, verbose: bool = False) -> None:
    """Set up logging configuration.

    Args:
        verbose: If True, enable debug logging.

    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        datefmt="%Y-%m-%d %H:%M:%S",
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=level,
    )


def _setup_argument_parser() -> argparse.ArgumentParser:
    """Set up command line argument parser.

    Returns:
        Configured ArgumentParser instance.

    """
    parser = argparse.ArgumentParser(
        description="Generate a golangci-lint configuration enabling every linter",
        epilog="""
Examples:
  # Write .golangci.yml, creating the disabled list and template if needed
  golangci-config-generator

  # Print the configuration instead of writing it
  golangci-config-generator --dry-run

  # Use a golangci-lint binary that is not on PATH
  golangci-config-generator --executable ./bin/golangci-lint

  # Enable verbose logging
  golangci-config-generator --verbose
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--disabled-file",
        default=DISABLED_FILE,
        help="Linters to leave out, one per line (default: %(default)s)",
        type=Path,
    )

    parser.add_argument(
        "--template-file",
        default=TEMPLATE_FILE,
        help="Configuration template (default: %(default)s)",
        type=Path,
    )

    parser.add_argument(
        "--output-file",
        default=OUTPUT_FILE,
        help="Generated configuration (default: %(default)s)",
        type=Path,
    )

    parser.add_argument(
        "--executable",
        default=GOLANGCI_LINT_EXECUTABLE,
        help="golangci-lint binary to query (default: %(default)s)",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the configuration instead of writing it",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging output",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the golangci-config-generator tool.

    Args:
        argv: Command line arguments, defaults to ``sys.argv[1:]``.

    Returns:
        Exit code (0 for success, non-zero for failure).

    """
    parser = _setup_argument_parser()
    args = parser.parse_args(argv)

    _setup_logging(verbose=args.verbose)

    # Create application instance and run
    app = Application(args=args)
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
