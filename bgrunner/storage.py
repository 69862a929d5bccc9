"""Files in the temporary directory that track background activities."""

from __future__ import annotations

import itertools
import json
import os
import tempfile
from pathlib import Path
from typing import BinaryIO

from bgrunner.models import BackgroundActivity, activity_from_dict

TEMP_DIR_NAME = "net.rerix.runner"


def temp_dir_path() -> Path:
    """Return the directory holding activity records and logs."""
    return Path(tempfile.gettempdir()) / TEMP_DIR_NAME


def ensure_temp_directory() -> Path:
    """Create the temp directory if needed and return it."""
    path = temp_dir_path()
    path.mkdir(parents=True, exist_ok=True)
    return path


def log_file_name(process_name: str) -> str:
    """Return a log file name for the process that is not taken yet."""
    directory = temp_dir_path()
    for suffix in itertools.count():
        name = process_name if suffix == 0 else f"{process_name}-{suffix}"
        name += ".log"
        if not (directory / name).exists():
            return name
    raise AssertionError("unreachable")


def open_log_file(name: str) -> BinaryIO:
    """Open (creating if needed) a log file in the temp directory for appending."""
    path = temp_dir_path() / name
    fd = os.open(path, os.O_CREAT | os.O_WRONLY | os.O_APPEND, 0o644)
    return os.fdopen(fd, "ab")


def list_temp_files() -> list[Path]:
    """Return the paths of all entries in the temp directory, sorted by name."""
    directory = temp_dir_path()
    return sorted((entry for entry in directory.iterdir()), key=lambda p: p.name)


def activity_path(pid: int) -> Path:
    """Return the path of the record for the given pid."""
    return temp_dir_path() / f"{pid}.json"


def write_activity(activity: BackgroundActivity) -> Path:
    """Store the activity record and return its path."""
    path = activity_path(activity.pid)
    path.write_text(
        json.dumps(activity.to_dict(), separators=(",", ":"), ensure_ascii=False),
        encoding="utf-8",
    )
    return path


def read_activity(path: str | os.PathLike[str]) -> BackgroundActivity:
    """Read an activity record; raises OSError or ValueError on failure."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return activity_from_dict(data)


def remove_activity_files(path: str | os.PathLike[str]) -> None:
    """Remove an activity's log file and then its record."""
    record = Path(path)
    activity = read_activity(record)
    (temp_dir_path() / activity.log_file).unlink()
    record.unlink()


def is_alive(pid: int) -> bool:
    """Tell whether a signal can be delivered to the process."""
    if pid <= 0:
        return False
    try:
        os.kill(pid, 0)
    except (OSError, OverflowError):
        return False
    return True


def _stored_activities() -> list[BackgroundActivity]:
    activities = []
    for path in list_temp_files():
        if not path.name.endswith(".json"):
            continue
        try:
            activities.append(read_activity(path))
        except (OSError, ValueError):
            print("Error reading activity temp file (internal error)")
    return activities


def delete_stopped_activities() -> list[int]:
    """Remove the records and logs of activities whose process is gone.

    Returns the pids whose process was found stopped.
    """
    stopped = []
    for activity in _stored_activities():
        if is_alive(activity.pid):
            continue
        stopped.append(activity.pid)
        try:
            remove_activity_files(activity_path(activity.pid))
        except (OSError, ValueError):
            pass
    return stopped