import io

import pytest

from minishell.envdict import EnvDict


@pytest.fixture
def env():
    return EnvDict.from_list(["HOME=/home/user", "SHELL=/bin/sh", "SHLVL=1"])


def test_from_list_parses_pairs(env):
    assert len(env) == 3
    assert env.get("HOME") == "/home/user"
    assert env.get("SHLVL") == "1"
    assert list(env)[1] == ("SHELL", "/bin/sh")


def test_from_list_keeps_extra_separators_in_value():
    env = EnvDict.from_list(["X=a=b"])
    assert env.get("X") == "a=b"


def test_from_list_drops_empty_pieces():
    env = EnvDict.from_list(["Y==c"])
    assert env.get("Y") == "c"


def test_from_list_entry_without_value():
    env = EnvDict.from_list(["EMPTY="])
    assert list(env) == [("EMPTY", None)]
    assert env.get("EMPTY") is None


def test_from_list_rejects_empty_entry():
    with pytest.raises(ValueError):
        EnvDict.from_list([""])


def test_get_requires_exact_key(env):
    assert env.get("HOM") is None
    assert env.get("HOMEX") is None
    assert env.get("MISSING") is None


def test_add_appends(env):
    env.add("EDITOR", "vi")
    assert len(env) == 4
    assert list(env)[-1] == ("EDITOR", "vi")


def test_add_fills_missing_values_with_space():
    env = EnvDict.from_list(["K="])
    env.add("N", "v")
    assert env.get("K") == " "
    assert env.get("N") == "v"


def test_add_without_key_raises(env):
    with pytest.raises(ValueError):
        env.add(None, "value")


def test_remove_matches_prefix():
    env = EnvDict.from_list(["PATH=x", "PATHX=y", "HOME=z"])
    assert env.remove("PATH") == 2
    assert list(env) == [("HOME", "z")]


def test_remove_missing_key_keeps_entries(env):
    before = list(env)
    assert env.remove("NOPE") == 0
    assert list(env) == before


def test_update_existing(env):
    env.update("SHLVL", "2")
    assert env.get("SHLVL") == "2"
    assert len(env) == 3


def test_update_missing_appends(env):
    env.update("LANG", "C")
    assert env.get("LANG") == "C"
    assert len(env) == 4


def test_update_entry_without_value():
    env = EnvDict.from_list(["A=", "B=b"])
    env.update("A", "a")
    assert env.get("A") == "a"
    assert len(env) == 2


def test_format_default_separator():
    env = EnvDict.from_list(["A=1", "B=2"])
    assert env.format() == "A: 1\nB: 2\n"


def test_format_custom_separator_skips_unset():
    env = EnvDict.from_list(["A=1", "B=", "C=3"])
    assert env.format("=") == "A=1\nC=3\n"


def test_write_matches_format(env):
    stream = io.StringIO()
    env.write(stream, "=")
    assert stream.getvalue() == env.format("=")


def test_round_trip_through_format():
    entries = ["A=1", "B=two", "C=x=y"]
    env = EnvDict.from_list(entries)
    lines = env.format("=").splitlines()
    assert lines == entries
    assert list(EnvDict.from_list(lines)) == list(env)