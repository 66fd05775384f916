"""golangci-config-generator: build a golangci-lint configuration file.

This package asks ``golangci-lint`` for every linter it knows about, removes
the ones listed in a user-maintained disabled list, and renders the rest into
a configuration template.
"""

__version__ = "0.1.0"

from .main import main

__all__ = ["main"]
