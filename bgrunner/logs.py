"""Showing the output that background commands wrote to their logs."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path


def read_log_file(path: str | os.PathLike[str]) -> str:
    """Print the whole log file to standard error and return its text."""
    try:
        text = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError:
        print("Error raeding log file (internal error)")
        raise
    print(text, file=sys.stderr)
    return text


def read_log_file_tail(path: str | os.PathLike[str], lines: int) -> int | None:
    """Follow the log file with tail, starting from its last lines.

    Returns tail's exit status, or None if interrupted from the keyboard.
    """
    try:
        completed = subprocess.run(["tail", "-n", str(lines), "-f", str(path)])
    except KeyboardInterrupt:
        return None
    except OSError:
        print("Error reading log file (internal error)")
        raise
    return completed.returncode