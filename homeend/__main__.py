"""homeend CLI entry point.

Allows running via `python -m homeend` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import logging
import sys

from .version import get_version_string

USAGE = "usage: homeend [--version] [--log-file PATH] [FILE]"


def setup_logging(log_file: str | None, level: int) -> None:
    """Send log records to log_file; the terminal belongs to the editor."""
    root = logging.getLogger("homeend")
    root.setLevel(level)
    if log_file is None:
        root.addHandler(logging.NullHandler())
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s"))
    root.addHandler(handler)


def main(argv: list[str] | None = None) -> int:
    # Very small arg parsing: version, optional log file and filename
    args = list(sys.argv[1:] if argv is None else argv)
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return 0

    log_file = None
    if args and args[0] == "--log-file":
        if len(args) < 2:
            print(USAGE, file=sys.stderr)
            return 2
        log_file = args[1]
        args = args[2:]
    if len(args) > 1 or (args and args[0].startswith("-")):
        print(USAGE, file=sys.stderr)
        return 2

    from .config import load_config
    config = load_config()
    setup_logging(log_file, config.numeric_log_level)

    # Lazy import to avoid importing UI deps for --version
    from .editor import Editor
    editor = Editor(config=config)
    if args:
        editor.load_file(args[0])
    editor.run()
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
