"""Remove disabled linters from a linter list."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Collection, Iterable

# Configure logging
logger = logging.getLogger(__name__)


def filter_linters(*, disabled: Collection[str], linters: Iterable[str]) -> list[str]:
    """Drop every linter named in the disabled set, keeping the original order.

    Args:
        disabled: Names that must not appear in the result.
        linters: Candidate names, in the order they should be rendered.

    Returns:
        The candidates that are not disabled.

    """
    enabled = []
    for linter in linters:
        if linter in disabled:
            logger.debug("Skipping disabled linter: %s", linter)
            continue
        enabled.append(linter)

    return enabled
