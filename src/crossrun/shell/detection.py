"""Shell resolution and launch configuration."""

import logging
import os
import shutil

from crossrun.models import LauncherConfig, ShellLaunchConfig

log = logging.getLogger("crossrun")

# Read commands from stdin; everything after "--" is a positional parameter.
STDIN_SCRIPT_FLAGS = ("-s", "--")


def _resolve_executable(candidate: str) -> str | None:
    """Resolve an executable name or path to a runnable command path."""
    has_sep = os.path.sep in candidate or (
        os.path.altsep is not None and os.path.altsep in candidate
    )
    if has_sep:
        if os.path.isfile(candidate) and os.access(candidate, os.X_OK):
            return candidate
        return None
    return shutil.which(candidate)


def build_launch_config(config: LauncherConfig, args: list[str]) -> ShellLaunchConfig:
    """Build the shell invocation that runs stdin as a script with ``args``."""
    executable = _resolve_executable(config.shell)
    if executable is None:
        # Let the spawn report the missing interpreter.
        log.debug("shell %r not resolvable, using it as-is", config.shell)
        executable = config.shell
    return ShellLaunchConfig(
        executable=executable,
        argv=[config.shell, *STDIN_SCRIPT_FLAGS, *args],
    )
