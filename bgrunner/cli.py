"""Command-line entry point for managing background commands."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from bgrunner import commands, config, storage

VERSION = "v1.0"
RUN_NAMES = ("run", "r", "start")


def _add_flag(parser: argparse.ArgumentParser, name: str, short: str, help_text: str) -> None:
    parser.add_argument(f"--{name}", f"-{short}", action="store_true", help=help_text)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all sub-commands."""
    parser = argparse.ArgumentParser(
        prog="runner", description="Manage commands that run in the background"
    )
    parser.add_argument("-v", "--version", action="version", version=f"runner version {VERSION}")
    sub = parser.add_subparsers(dest="alias", metavar="command")

    run = sub.add_parser("run", aliases=["r", "start"], help="Run command in the background")
    run.add_argument("args", nargs=argparse.REMAINDER, metavar="command")
    run.set_defaults(command="run")

    listing = sub.add_parser(
        "list", aliases=["l", "ls"], help="Lists all running backgrund activities (commands)"
    )
    listing.set_defaults(command="list")

    view = sub.add_parser(
        "view", aliases=["v", "show"], help="View live output of process (experimental)"
    )
    _add_flag(view, "pid", "p", "view process using its pid")
    view.add_argument("args", nargs="*", metavar="name")
    view.set_defaults(command="view")

    log = sub.add_parser("log", help="Show output of process")
    _add_flag(log, "pid", "p", "show process output using its pid")
    log.add_argument("args", nargs="*", metavar="name")
    log.set_defaults(command="log")

    stop = sub.add_parser("stop", aliases=["end", "kill", "s"], help="Stops an activity")
    _add_flag(stop, "pid", "p", "stop process using its pid")
    _add_flag(stop, "all", "a", "stop all process matching the specified name")
    stop.add_argument("args", nargs="*", metavar="name")
    stop.set_defaults(command="stop")

    restart = sub.add_parser("restart", help="restarts a process")
    _add_flag(restart, "pid", "p", "restart process using its pid")
    _add_flag(restart, "all", "a", "restart all process matching name")
    restart.add_argument("args", nargs="*", metavar="name")
    restart.set_defaults(command="restart")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    arguments = sys.argv[1:] if argv is None else list(argv)

    try:
        storage.ensure_temp_directory()
    except OSError:
        print("Couldn't ensure temp directory (internal error)")
        return 1

    try:
        settings = config.load_config()
    except (OSError, ValueError):
        print("Error reading config file (internal error)")
        return 1

    # Everything after "run" belongs to the started command, options included.
    if arguments and arguments[0] in RUN_NAMES:
        commands.run_command(arguments[1:])
        return 0

    parser = build_parser()
    namespace = parser.parse_args(arguments)
    command = getattr(namespace, "command", None)

    if command is None:
        parser.print_help()
    elif command == "run":
        commands.run_command(namespace.args)
    elif command == "list":
        commands.list_command()
    elif command in ("view", "log"):
        commands.view_command(
            namespace.args, namespace.pid, command == "view", settings.start_lines
        )
    elif command == "stop":
        commands.stop_command(namespace.args, namespace.pid, namespace.all)
    elif command == "restart":
        commands.restart_command(namespace.args, namespace.pid, namespace.all)
    return 0