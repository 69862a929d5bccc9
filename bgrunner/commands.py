"""The actions behind each sub-command, printing their results."""

from __future__ import annotations

import re
from collections.abc import Sequence
from contextlib import suppress

from bgrunner import logs, processes, storage
from bgrunner.config import DEFAULT_START_LINES
from bgrunner.models import BackgroundActivity

_PID_PATTERN = re.compile(r"[+-]?\d+")


def _parse_pid(text: str) -> int | None:
    if not _PID_PATTERN.fullmatch(text):
        return None
    return int(text)


def run_command(args: Sequence[str]) -> BackgroundActivity | None:
    """Start the command in the background and report it."""
    args = list(args)
    if not args:
        print("Must provide a command!")
        return None
    try:
        activity = processes.start_in_background(args)
    except OSError as exc:
        print(f"Error while executing command: \n{exc}")
        return None
    if activity is None:
        return None
    print(f"Started {activity.command} (pid {activity.pid}) in the background!")
    return activity


def list_command() -> list[BackgroundActivity]:
    """Print the running activities and return them."""
    try:
        return processes.list_activities()
    except OSError:
        print("Error listing activities (internal error)")
        return []


def view_command(
    args: Sequence[str],
    use_pid: bool = False,
    use_tail: bool = True,
    start_lines: int = DEFAULT_START_LINES,
) -> str | int | None:
    """Show an activity's log, following it with tail when use_tail is set.

    Returns the log text, tail's exit status, or None if nothing was shown.
    """
    lines = max(start_lines, 0)
    args = list(args)
    if not args:
        print("Please enter a process name or a PID using --pid")
        return None

    name = args[0]
    pid = 0
    if use_pid:
        parsed = _parse_pid(name)
        if parsed is None:
            print("Please enter a valid pid!")
            return None
        pid = parsed

    try:
        pids = processes.get_pids(name)
    except OSError:
        pids = []
    if len(pids) > 1:
        print(f'More than one process found with name "{name}"')
        return None
    if not use_pid:
        if not pids:
            print(f'Process "{name}" not found')
            return None
        pid = pids[0]

    try:
        activity = storage.read_activity(storage.activity_path(pid))
    except (OSError, ValueError):
        print("pid not found!")
        return None

    log_path = storage.temp_dir_path() / activity.log_file
    try:
        if use_tail:
            return logs.read_log_file_tail(log_path, lines)
        return logs.read_log_file(log_path)
    except OSError:
        return None


def stop_command(
    args: Sequence[str], use_pid: bool = False, all_matching: bool = False
) -> list[int]:
    """Stop an activity by name or pid and return the pids stopped."""
    args = list(args)
    if not args:
        print("Please enter a valid process name")
        return []

    with suppress(OSError):
        storage.delete_stopped_activities()

    if use_pid:
        pid = _parse_pid(args[0])
        if pid is None:
            print("Please enter a valid pid!")
            return []
        try:
            processes.stop_activity(pid)
        except OSError:
            print("pid not found!")
            return []
        print(f"Stopped process {pid}")
        return [pid]

    name = args[0].lower()
    try:
        stopped = processes.stop_activity_with_name(name, all_matching)
    except processes.ActivityNotFoundError:
        return []
    except OSError:
        print("Error while trying to stop process!")
        return []
    print(f"Stopped process: {name}")
    return stopped


def _single_pid(name: str) -> int | None:
    try:
        pids = processes.get_pids(name)
    except OSError:
        print("Error getting PIDs (internal error)")
        return None
    if len(pids) == 1:
        return pids[0]
    if not pids:
        print(f'No process found with name "{name}"')
        return None
    print(f'Multiple processes with name "{name}" found')
    print(f'Use --pid for a specific process or --all to restart all matching "{name}"')
    return None


def restart_command(
    args: Sequence[str], use_pid: bool = False, all_matching: bool = False
) -> BackgroundActivity | None:
    """Stop an activity and start its command again; return the new activity."""
    args = list(args)
    if not args:
        print("Please enter a valid process name")
    name = args[0] if args else ""

    pid = 0
    if use_pid:
        parsed = _parse_pid(name)
        if parsed is None:
            print("Please enter a valid pid (numbers only)")
            return None
        pid = parsed
    elif not all_matching:
        found = _single_pid(name)
        if found is None:
            return None
        pid = found

    try:
        activity = storage.read_activity(storage.activity_path(pid))
    except (OSError, ValueError):
        print(f"Process with id {name} not found")
        return None

    try:
        processes.stop_activity(pid)
    except OSError:
        print("Error stopping process (internal error)")
        return None

    try:
        return processes.start_in_background([activity.command, *activity.arguments])
    except OSError:
        print("Error starting process (internal error)")
        return None