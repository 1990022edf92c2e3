"""Run a script payload through a shell with stdio and exit-code passthrough."""

import logging
import os
import signal
import subprocess
import sys

from crossrun.errors import (
    CompletionError,
    LaunchError,
    LauncherError,
    SetupError,
    TransferError,
)
from crossrun.models import LauncherConfig, ShellLaunchConfig
from crossrun.shell import build_launch_config

log = logging.getLogger("crossrun")


def _open_input_channel() -> tuple[int, int]:
    """Return (read_fd, write_fd) for the child's stdin."""
    try:
        return os.pipe()
    except OSError as e:
        raise SetupError(e) from e


def _flush_std_streams() -> None:
    # The child writes straight to fds 1 and 2, so anything we buffered goes first.
    for stream in (sys.stdout, sys.stderr):
        try:
            stream.flush()
        except (OSError, ValueError):
            pass


def _start(launch: ShellLaunchConfig, stdin_fd: int) -> subprocess.Popen:
    _flush_std_streams()
    try:
        return subprocess.Popen(launch.argv, executable=launch.executable, stdin=stdin_fd)
    except (OSError, subprocess.SubprocessError) as e:
        raise LaunchError(e) from e


def _write_payload(stdin, payload: bytes) -> None:
    stdin.write(payload)


def _transfer(write_fd: int, payload: bytes) -> None:
    """Write the whole payload, then close the child's stdin."""
    try:
        with os.fdopen(write_fd, "wb") as stdin:
            _write_payload(stdin, payload)
    except OSError as e:
        raise TransferError(e) from e


def _describe_signal(signum: int) -> str:
    try:
        return signal.Signals(signum).name
    except ValueError:
        return f"signal {signum}"


def _wait(proc: subprocess.Popen) -> int:
    try:
        returncode = proc.wait()
    except (OSError, subprocess.SubprocessError) as e:
        raise CompletionError(e) from e
    if returncode < 0:
        raise CompletionError(f"shell terminated by {_describe_signal(-returncode)}")
    return returncode


def _run_script(launch: ShellLaunchConfig, payload: bytes) -> int:
    read_fd, write_fd = _open_input_channel()
    try:
        proc = _start(launch, read_fd)
    except LaunchError:
        os.close(write_fd)
        raise
    finally:
        os.close(read_fd)
    log.debug("started pid=%d", proc.pid)

    log.debug("writing %d payload bytes", len(payload))
    _transfer(write_fd, payload)

    returncode = _wait(proc)
    log.debug("pid=%d exited with %d", proc.pid, returncode)
    return returncode


def run(args: list[str], payload: bytes, config: LauncherConfig | None = None) -> int:
    """Run ``payload`` through a shell with ``args`` as its positional parameters.

    The child inherits our stdout and stderr; its stdin receives only the
    payload. Returns the child's exit code, or ``config.failure_exit_code``
    after printing a one-line diagnostic when the launcher itself fails.
    """
    if config is None:
        config = LauncherConfig()
    launch = build_launch_config(config, list(args))
    log.debug("argv=%s executable=%s", launch.argv, launch.executable)

    try:
        return _run_script(launch, payload)
    except LauncherError as e:
        log.debug("launcher failure: %r", e.reason)
        print(e, file=sys.stderr)
        return config.failure_exit_code
