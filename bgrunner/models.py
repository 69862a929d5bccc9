"""Records describing commands started in the background."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

_KEY_TO_FIELD = {
    "command": "command",
    "pid": "pid",
    "logfile": "log_file",
    "arguments": "arguments",
}


@dataclass
class BackgroundActivity:
    """A command running in the background, its pid and its log file."""

    command: str = ""
    pid: int = 0
    log_file: str = ""
    arguments: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the record in its stored JSON shape."""
        return {
            "command": self.command,
            "pid": self.pid,
            "logFile": self.log_file,
            "arguments": list(self.arguments),
        }


def activity_from_dict(data: Any) -> BackgroundActivity:
    """Build an activity from a decoded JSON object.

    Keys are matched without regard to case; missing or null values keep
    their defaults. Values of the wrong type raise ValueError.
    """
    if not isinstance(data, dict):
        raise ValueError("activity record must be a JSON object")

    values: dict[str, Any] = {}
    for key, value in data.items():
        attr = _KEY_TO_FIELD.get(str(key).lower())
        if attr is None or value is None:
            continue
        values[attr] = value

    command = values.get("command", "")
    if not isinstance(command, str):
        raise ValueError("activity command must be a string")

    pid = values.get("pid", 0)
    if not isinstance(pid, int) or isinstance(pid, bool):
        raise ValueError("activity pid must be an integer")

    log_file = values.get("log_file", "")
    if not isinstance(log_file, str):
        raise ValueError("activity log file must be a string")

    arguments = values.get("arguments", [])
    if not isinstance(arguments, list) or not all(isinstance(a, str) for a in arguments):
        raise ValueError("activity arguments must be a list of strings")

    return BackgroundActivity(
        command=command,
        pid=pid,
        log_file=log_file,
        arguments=list(arguments),
    )