"""Sanity tests to ensure code quality standards are maintained."""

from __future__ import annotations

import ast
import logging
from pathlib import Path
from typing import Any

import pytest

# Setup logger
logger = logging.getLogger(__name__)

# Directories checked, relative to the repository root
CHECKED_DIRECTORIES = (Path("src"), Path("tests"))


class ArgumentOrderChecker(ast.NodeVisitor):
    """Check that function arguments are in alphabetical order."""

    def __init__(self) -> None:
        """Initialize the checker."""
        self.violations: list[dict[str, Any]] = []
        self.current_file: Path | None = None

    def _check_definition(
        self, definition: ast.AsyncFunctionDef | ast.FunctionDef, label: str
    ) -> None:
        """Record a definition whose positional arguments are out of order.

        Args:
            definition: The function definition.
            label: Label used in the violation report.

        """
        # Get function argument names, excluding self and cls
        args = [
            arg.arg
            for arg in definition.args.args
            if arg.arg not in {"self", "cls"}
        ]

        sorted_args = sorted(args)
        if args != sorted_args:
            self.violations.append(
                {
                    "current_order": args,
                    "expected_order": sorted_args,
                    "file": str(self.current_file),
                    "function": definition.name,
                    "line": definition.lineno,
                    "type": label,
                }
            )

    def visit_FunctionDef(self, node: ast.FunctionDef) -> None:  # noqa: N802
        """Visit function definitions to check argument order.

        Args:
            node: The AST node representing a function definition.

        """
        self._check_definition(node, "Function definition")
        self.generic_visit(node)

    def visit_AsyncFunctionDef(self, node: ast.AsyncFunctionDef) -> None:  # noqa: N802
        """Visit async function definitions to check argument order.

        Args:
            node: The AST node representing an async function definition.

        """
        self._check_definition(node, "Async function definition")
        self.generic_visit(node)

    def visit_Call(self, node: ast.Call) -> None:  # noqa: N802
        """Visit function calls to check keyword argument order.

        Args:
            node: The AST node representing a function call.

        """
        kwargs = [keyword.arg for keyword in node.keywords if keyword.arg is not None]

        if len(kwargs) > 1:
            sorted_kwargs = sorted(kwargs)
            if kwargs != sorted_kwargs:
                func_name = "unknown"
                if isinstance(node.func, ast.Name):
                    func_name = node.func.id
                elif isinstance(node.func, ast.Attribute):
                    func_name = node.func.attr

                self.violations.append(
                    {
                        "current_order": kwargs,
                        "expected_order": sorted_kwargs,
                        "file": str(self.current_file),
                        "function": func_name,
                        "line": node.lineno,
                        "type": "Function call",
                    }
                )

        self.generic_visit(node)

    def check_file(self, file_path: Path) -> None:
        """Check a single Python file for argument ordering violations.

        Args:
            file_path: Path to the Python file to check.

        """
        self.current_file = file_path
        try:
            tree = ast.parse(file_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, SyntaxError) as e:
            logger.warning("Could not parse file %s: %s", file_path, e)
            return
        self.visit(tree)

    def check_directory(self, directory: Path) -> None:
        """Check all Python files in a directory for argument ordering violations.

        Args:
            directory: Path to the directory to check.

        """
        for py_file in sorted(directory.rglob("*.py")):
            self.check_file(py_file)


@pytest.fixture(name="violations")
def _violations() -> list[dict[str, Any]]:
    """Run the checker over the source and test trees.

    Returns:
        Every violation found.

    """
    checker = ArgumentOrderChecker()
    for directory in CHECKED_DIRECTORIES:
        if directory.exists():
            checker.check_directory(directory)
    return checker.violations


def test_function_arguments_alphabetical_order(
    violations: list[dict[str, Any]],
) -> None:
    """Test that all function definitions have arguments in alphabetical order.

    Args:
        violations: Violations found in the source and test trees.

    """
    definition_violations = [v for v in violations if v["type"] != "Function call"]

    if definition_violations:
        error_lines = ["Function definition argument ordering violations:"]
        error_lines.extend(
            [
                f"  {violation['file']}:{violation['line']} - "
                f"{violation['type']} '{violation['function']}' - "
                f"args: {violation['current_order']} -> {violation['expected_order']}"
                for violation in definition_violations
            ]
        )
        pytest.fail("\n".join(error_lines))


def test_function_calls_alphabetical_kwargs(violations: list[dict[str, Any]]) -> None:
    """Test that all function calls have keyword arguments in alphabetical order.

    Args:
        violations: Violations found in the source and test trees.

    """
    call_violations = [v for v in violations if v["type"] == "Function call"]

    if call_violations:
        error_lines = ["Function call keyword argument ordering violations:"]
        error_lines.extend(
            [
                f"  {violation['file']}:{violation['line']} - "
                f"call to '{violation['function']}' - "
                f"kwargs: {violation['current_order']} -> {violation['expected_order']}"
                for violation in call_violations
            ]
        )
        pytest.fail("\n".join(error_lines))
