# bgrunner

A small command-line tool for starting commands in the background and keeping
track of them afterwards: list what is running, read or follow its output,
stop it, or restart it. It has no dependencies beyond the standard library
and is meant for POSIX systems.

## Installation

```
pip install .
```

This installs the `runner` command. For the tests:

```
pip install ".[test]"
pytest
```

## Usage

Start a command in the background. Everything after `run` is taken as the
command and its arguments, options included:

```
runner run python -m http.server 8000
```

Standard output and standard error go to a log file in the storage directory
(see below), standard input is `/dev/null`, and the process runs in its own
session, detached from your terminal. The command prints
`Started <command> (pid <pid>) in the background!`.

List the activities that are still running:

```
runner list
```

Print the whole log of a process, by name or by pid (the log text is written
to standard error):

```
runner log python
runner log --pid 12345
```

Follow the log live with the `tail` program, starting with the last
`startLines` lines; stop with Ctrl-C:

```
runner view python
runner view --pid 12345
```

Stop a process (with SIGKILL) by name, by pid, or every process with the same
name:

```
runner stop python
runner stop --pid 12345
runner stop --all python
```

Restart a process: it is killed and its command is started again with the
same arguments, under a new pid:

```
runner restart python
runner restart --pid 12345
```

Print the version:

```
runner --version
```

Short aliases exist: `r`/`start` for `run`, `l`/`ls` for `list`,
`v`/`show` for `view`, and `end`/`kill`/`s` for `stop`. The flags have short
forms too: `-p` for `--pid` and `-a` for `--all`.

A process is found by name when its command, in lower case, equals the name
given. `stop` lower-cases the name first; `view`, `log` and `restart` use it
as typed. When a name matches more than one running process, `view`, `log`,
`stop` and `restart` refuse and ask for `--pid` (or `--all` for `stop`).

## Configuration

On first start a configuration file is created at
`~/.config/runner/runner.json`:

```json
{"startLines": 20}
```

`startLines` sets how many lines of earlier output `runner view` shows before
following the log; negative values count as 0. If the file is not valid JSON
or `startLines` is not an integer, `runner` prints
`Error reading config file (internal error)` and exits with status 1.

## Storage

Bookkeeping files live in `<system temp dir>/net.rerix.runner`: one
`<pid>.json` record per activity and one `<command>.log` file per started
command (`<command>-1.log`, `<command>-2.log`, … when the name is taken).
Records and logs of processes that have exited are removed whenever `list`
or `stop` runs, and whenever `view`, `log` or `restart` looks a process up.

## Using it from Python

The modules can also be used directly:

- `bgrunner.processes`: `start_in_background`, `running_activities`,
  `get_pids`, `stop_activity`, `stop_activity_with_name`, `list_activities`
  and `exec_command`.
- `bgrunner.storage`: the storage directory and the activity records
  (`write_activity`, `read_activity`, `delete_stopped_activities`, `is_alive`
  and others).
- `bgrunner.models`: the `BackgroundActivity` record and `activity_from_dict`.
- `bgrunner.config`: `Config`, `load_config` and `ensure_config_file`.
- `bgrunner.logs`: `read_log_file` and `read_log_file_tail`.
- `bgrunner.commands`: the actions behind each sub-command.
- `bgrunner.cli`: `build_parser` and `main`.

## Limitations

- `runner restart --all` is accepted but does not restart every matching
  process; it reports that the process was not found.
- There is no shell completion.
- `runner view` needs the `tail` program on the `PATH`.
- Processes are checked and stopped with POSIX signals, so the tool does not
  work on Windows.