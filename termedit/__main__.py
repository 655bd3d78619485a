"""termedit CLI entry point.

Allows running via `python -m termedit` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import sys

from .editor import Editor
from .log import configure_logging


def main() -> int:
    # The only argument is an optional file to open
    args = sys.argv[1:]
    configure_logging()

    editor = Editor()
    if args:
        editor.load_file(args[0])
    editor.run()
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
