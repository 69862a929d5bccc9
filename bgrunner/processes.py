"""Starting, finding and stopping commands that run in the background."""

from __future__ import annotations

import os
import signal
import subprocess
from collections.abc import Sequence
from contextlib import suppress

from bgrunner import storage
from bgrunner.models import BackgroundActivity


class ActivityNotFoundError(LookupError):
    """No background activity matches the given name."""


def exec_command(commands: Sequence[str]) -> str | None:
    """Run a command in the foreground, print its output and return it.

    On failure an error message is printed and None is returned.
    """
    try:
        completed = subprocess.run(
            list(commands),
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError) as exc:
        print("Error executing command")
        print(exc)
        return None
    output = completed.stdout.decode(errors="replace")
    print(output)
    return output


def start_in_background(commands: Sequence[str]) -> BackgroundActivity | None:
    """Start a command detached from the terminal, logging its output.

    Returns the stored activity, or None if the log file could not be
    opened. Raises OSError if the command cannot be started.
    """
    commands = list(commands)
    if not commands:
        raise ValueError("no command given")
    program, *arguments = commands

    log_name = storage.log_file_name(program)
    try:
        log = storage.open_log_file(log_name)
    except OSError:
        print("Error opening log file (internal error)")
        return None

    with log:
        try:
            devnull = open(os.devnull, "rb")
        except OSError:
            print("Error opening /dev/null (internal error)")
            raise
        with devnull:
            process = subprocess.Popen(
                commands,
                stdin=devnull,
                stdout=log,
                stderr=log,
                start_new_session=True,
            )

    activity = BackgroundActivity(
        command=program,
        pid=process.pid,
        log_file=log_name,
        arguments=arguments,
    )
    storage.write_activity(activity)
    return activity


def running_activities() -> list[BackgroundActivity]:
    """Return every activity recorded in the temp directory."""
    try:
        paths = storage.list_temp_files()
    except OSError:
        print("Error getting temp files (internal error)")
        raise

    activities = []
    for path in paths:
        if not path.name.endswith(".json"):
            continue
        try:
            activities.append(storage.read_activity(path))
        except (OSError, ValueError):
            print("Error reading activity temp file (internal error)")
    return activities


def stop_activity(pid: int) -> None:
    """Kill the process; raises ProcessLookupError if it does not exist."""
    if pid <= 0:
        raise ProcessLookupError(f"no process with pid {pid}")
    os.kill(pid, 0)
    with suppress(ProcessLookupError):
        os.kill(pid, signal.SIGKILL)


def get_pids(name: str) -> list[int]:
    """Return the pids of live activities whose command, lower-cased, is name."""
    storage.delete_stopped_activities()
    try:
        activities = running_activities()
    except OSError:
        print("Error getting running background activities (internal error)")
        raise
    return [activity.pid for activity in activities if activity.command.lower() == name]


def stop_activity_with_name(name: str, all_matching: bool = False) -> list[int]:
    """Stop the activity with the given name and return the pids stopped.

    With all_matching every match is stopped. Without it, a missing name
    raises ActivityNotFoundError and an ambiguous one stops nothing.
    """
    try:
        pids = get_pids(name)
    except OSError:
        pids = []

    if all_matching:
        for pid in pids:
            stop_activity(pid)
        return pids

    if not pids:
        print(f'Process "{name}" not found')
        raise ActivityNotFoundError(name)

    if len(pids) > 1:
        print(f"Process with same name ({name}) exists more than once!")
        print(
            "Please use the --pid to stop a specific process or --all to "
            "quick all processes matching the name!"
        )
        return []

    stop_activity(pids[0])
    return pids


def list_activities() -> list[BackgroundActivity]:
    """Print and return the activities still running."""
    storage.delete_stopped_activities()
    try:
        activities = running_activities()
    except OSError:
        print("Error getting running background activites (internal error)")
        raise

    if not activities:
        print("No activities running in the background!")
        return []

    print("All running activities:")
    for activity in activities:
        print(f"\t({activity.pid}) {activity.command}")
    return activities