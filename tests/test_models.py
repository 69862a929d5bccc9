import json

import pytest

from bgrunner.models import BackgroundActivity, activity_from_dict


def test_to_dict_uses_stored_key_names():
    activity = BackgroundActivity(command="sleep", pid=42, log_file="sleep.log", arguments=["10"])
    assert activity.to_dict() == {
        "command": "sleep",
        "pid": 42,
        "logFile": "sleep.log",
        "arguments": ["10"],
    }


def test_round_trip_through_json():
    activity = BackgroundActivity(command="python", pid=7, log_file="python-1.log", arguments=["-m", "http.server"])
    decoded = json.loads(json.dumps(activity.to_dict()))
    assert activity_from_dict(decoded) == activity


def test_to_dict_copies_arguments():
    activity = BackgroundActivity(command="ls", pid=1, log_file="ls.log", arguments=["-l"])
    data = activity.to_dict()
    data["arguments"].append("-a")
    assert activity.arguments == ["-l"]


def test_missing_fields_take_defaults():
    assert activity_from_dict({}) == BackgroundActivity()


def test_null_arguments_become_empty_list():
    activity = activity_from_dict({"command": "top", "pid": 3, "logFile": "top.log", "arguments": None})
    assert activity.arguments == []


def test_keys_match_without_case():
    activity = activity_from_dict({"COMMAND": "vim", "Pid": 9, "logfile": "vim.log"})
    assert (activity.command, activity.pid, activity.log_file) == ("vim", 9, "vim.log")


def test_unknown_keys_are_ignored():
    activity = activity_from_dict({"command": "cat", "extra": True})
    assert activity.command == "cat"


@pytest.mark.parametrize(
    "data",
    [
        {"pid": "12"},
        {"pid": 1.5},
        {"pid": True},
        {"command": 5},
        {"logFile": ["x"]},
        {"arguments": "a b"},
        {"arguments": [1, 2]},
    ],
)
def test_wrong_types_raise(data):
    with pytest.raises(ValueError):
        activity_from_dict(data)


@pytest.mark.parametrize("data", [None, [], "text", 3])
def test_non_object_raises(data):
    with pytest.raises(ValueError):
        activity_from_dict(data)