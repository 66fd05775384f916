"""Constants for the golangci-config-generator tool."""

from __future__ import annotations

from pathlib import Path
from typing import Final

# Files read from and written to the working directory
DISABLED_FILE: Final[Path] = Path(".golangci-disabled.txt")
TEMPLATE_FILE: Final[Path] = Path(".golangci-template.yml")
OUTPUT_FILE: Final[Path] = Path(".golangci.yml")

# Mode used when creating any of the files above, masked by the umask
FILE_MODE: Final[int] = 0o777

# Legacy linters that golangci-lint still lists but has deprecated
DEFAULT_DISABLED_CONTENT: Final[bytes] = b"""golint
interfacer
maligned
scopelint
"""

DEFAULT_TEMPLATE_CONTENT: Final[bytes] = b"""linters:
  disable-all: true
  enable:
  {{- range .LinterList }}
    - {{ . }}
  {{- end }}
"""

# Name of the sequence bound into the template
LINTER_LIST_VARIABLE: Final[str] = "LinterList"

GOLANGCI_LINT_EXECUTABLE: Final[str] = "golangci-lint"
LINTERS_SUBCOMMAND: Final[str] = "linters"

# Substrings golangci-lint uses in its group headers, e.g.
# "Enabled by default linters:" or "Disabled by your configuration linters:"
STATUS_MARKERS: Final[tuple[str, ...]] = ("Disabled", "Enabled")
