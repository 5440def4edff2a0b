import subprocess
import sys

import pytest

from dkits import system

KEY = "DKITS_TEST_FOO"


@pytest.mark.parametrize(
    "platform,expected",
    [
        ("linux", (False, True, False)),
        ("darwin", (False, False, True)),
        ("win32", (True, False, False)),
        ("freebsd13", (False, False, False)),
    ],
)
def test_os_detection(monkeypatch, platform, expected):
    monkeypatch.setattr(sys, "platform", platform)
    assert (system.is_windows(), system.is_linux(), system.is_mac()) == expected


def test_env_operations(monkeypatch):
    monkeypatch.delenv(KEY, raising=False)
    assert system.get_os_env(KEY) == ""
    system.set_os_env(KEY, "foo_value")
    try:
        assert system.get_os_env(KEY) == "foo_value"
        assert system.compare_os_env(KEY, "foo_value") is True
        assert system.compare_os_env(KEY, "abc") is False
        assert system.compare_os_env("DKITS_TEST_ABSENT", "abc") is False
    finally:
        system.remove_os_env(KEY)
    assert system.compare_os_env(KEY, "foo_value") is False
    assert system.get_os_env(KEY) == ""


def test_remove_missing_env_is_harmless(monkeypatch):
    monkeypatch.delenv(KEY, raising=False)
    system.remove_os_env(KEY)
    assert system.get_os_env(KEY) == ""


def test_compare_empty_value_is_false(monkeypatch):
    monkeypatch.setenv(KEY, "")
    assert system.compare_os_env(KEY, "") is False


def test_exec_command_output():
    assert system.exec_command("echo hello") == ("hello\n", "")


def test_exec_command_failure_raises():
    with pytest.raises(subprocess.CalledProcessError) as info:
        system.exec_command("echo partial; echo oops >&2; exit 3")
    assert info.value.returncode == 3
    assert info.value.stdout == "partial\n"
    assert info.value.stderr == "oops\n"


def test_exec_command_unknown_program_raises():
    with pytest.raises(subprocess.CalledProcessError) as info:
        system.exec_command("dkits-no-such-command-xyz")
    assert info.value.returncode == 127