import pytest

from kssh.environment import Environment, export_key, is_valid_identifier


def _env():
    return Environment.from_strings(["PATH=/bin:/usr/bin", "HOME=/home/user", "_=ls"])


def test_from_strings_round_trip():
    entries = ["PATH=/bin:/usr/bin", "A=x=y", "EMPTY="]
    env = Environment.from_strings(entries)
    assert env.to_strings() == entries
    assert env.get("A") == "x=y"
    assert env.get("EMPTY") == ""


def test_get_missing():
    assert _env().get("NOPE") is None


def test_set_keeps_position_and_appends_new():
    env = _env()
    env.set("PATH", "/opt")
    env.set("NEW", "v")
    assert list(env) == ["PATH", "HOME", "_", "NEW"]
    assert env.get("PATH") == "/opt"


def test_sorted_items_ordering():
    env = Environment.from_strings(["b=2", "_=u", "B=1", "a=3"])
    keys = [key for key, _ in env.sorted_items()]
    assert keys == sorted(keys)
    assert keys[0] == "B"
    assert list(env) == ["b", "_", "B", "a"]


def test_change_pwd():
    env = _env()
    env.change_pwd("/old", "/new")
    assert env.get("OLDPWD") == "/old"
    assert env.get("PWD") == "/new"


def test_set_underscore_only_when_present():
    env = _env()
    env.set_underscore("grep")
    assert env.get("_") == "grep"
    other = Environment.from_strings(["A=1"])
    other.set_underscore("grep")
    assert "_" not in other
    env.set_underscore(None)
    assert env.get("_") == "grep"


def test_increment_shlvl():
    env = Environment.from_strings(["SHLVL=3"])
    env.increment_shlvl()
    assert env.get("SHLVL") == "4"


def test_increment_shlvl_limit(capsys):
    env = Environment.from_strings(["SHLVL=999"])
    env.increment_shlvl()
    assert env.get("SHLVL") == "1"
    assert "warning: shell level (999) too high, resetting to 1" in capsys.readouterr().out


def test_increment_shlvl_missing():
    env = Environment.from_strings(["A=1"])
    env.increment_shlvl()
    assert "SHLVL" not in env
    assert len(env) == 1


@pytest.mark.parametrize(
    "variable, key",
    [("A=b", "A"), ("A+=b", "A"), ("A", "A"), ("a+b=c", "a+b"), ("=x", "")],
)
def test_export_key(variable, key):
    assert export_key(variable) == key


@pytest.mark.parametrize(
    "char, index, expected",
    [("a", 0, True), ("_", 0, True), ("1", 0, False), ("1", 2, True), ("-", 1, False)],
)
def test_is_valid_identifier(char, index, expected):
    assert is_valid_identifier(char, index) is expected