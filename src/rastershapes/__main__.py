"""Console entrypoint for the rastershapes application.

This module delegates to :mod:`rastershapes.cli` so that running
``python -m rastershapes`` or the installed ``rastershapes`` console script
executes the same application code.
"""

from __future__ import annotations

import sys

from rastershapes.cli import main as cli_main


def main() -> None:
    """Application entrypoint (delegates to :func:`rastershapes.cli.main`)."""
    sys.exit(cli_main())


if __name__ == "__main__":
    main()
