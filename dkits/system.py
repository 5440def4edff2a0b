"""Operating system detection, environment variables and shell commands."""

from __future__ import annotations

import os
import subprocess
import sys


def is_windows() -> bool:
    """Return True on Windows."""
    return sys.platform == "win32"


def is_linux() -> bool:
    """Return True on Linux."""
    return sys.platform.startswith("linux")


def is_mac() -> bool:
    """Return True on macOS."""
    return sys.platform == "darwin"


def get_os_env(key: str) -> str:
    """Return the environment variable ``key``, or an empty string."""
    return os.environ.get(key, "")


def set_os_env(key: str, value: str) -> None:
    """Set the environment variable ``key`` to ``value``."""
    os.environ[key] = value


def remove_os_env(key: str) -> None:
    """Unset the environment variable ``key`` if it is set."""
    os.environ.pop(key, None)


def compare_os_env(key: str, compared_env: str) -> bool:
    """Return True when ``key`` is set, non-empty and equal to ``compared_env``."""
    env = get_os_env(key)
    if env == "":
        return False
    return env == compared_env


def exec_command(command: str) -> tuple[str, str]:
    """Run ``command`` with ``/bin/bash -c`` and return ``(stdout, "")``.

    On Windows a bare ``cmd`` is started instead. A non-zero exit raises
    subprocess.CalledProcessError carrying the captured stdout and stderr.
    """
    args = ["cmd"] if is_windows() else ["/bin/bash", "-c", command]
    completed = subprocess.run(
        args,
        stdin=subprocess.DEVNULL,
        capture_output=True,
        check=False,
    )
    stdout = completed.stdout.decode("utf-8", errors="replace")
    if completed.returncode != 0:
        stderr = completed.stderr.decode("utf-8", errors="replace")
        raise subprocess.CalledProcessError(
            completed.returncode, args, output=stdout, stderr=stderr
        )
    return stdout, ""