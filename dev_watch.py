"""Restart the category browser whenever a source file changes."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Set, Tuple

from watchfiles import Change, DefaultFilter, run_process


def _report(changes: Set[Tuple[Change, str]]) -> None:
    if not changes:
        return
    print("\nRestarting, changed:")
    for change, path in sorted(changes, key=lambda item: item[1]):
        print(f"  {change.name.lower():<8} {path}")


def main() -> None:
    root = Path(__file__).parent.resolve()
    src_path = root / "src"

    # Child process logs at DEBUG
    os.environ.setdefault("CATBROWSER_ENV", "dev")
    os.chdir(root)

    watch_filter = DefaultFilter(
        ignore_dirs=["data", "tests", "__pycache__", ".git"],
        ignore_entity_patterns=["*.pyc", "*.db", "*.db-journal", "*.log"],
    )

    print(f"Watching {src_path} (Ctrl+C to stop)")

    try:
        run_process(
            src_path,
            target=f"{sys.executable} src/main.py",
            target_type="command",
            watch_filter=watch_filter,
            grace_period=0.8,
            debounce=800,
            callback=_report,
        )
    except KeyboardInterrupt:
        print("\nStopped")
        sys.exit(0)


if __name__ == "__main__":
    main()
