"""Model package for crossrun."""

from crossrun.models.launcher_config import (
    DEFAULT_FAILURE_EXIT_CODE,
    DEFAULT_SHELL,
    LauncherConfig,
)
from crossrun.models.shell_launch_config import ShellLaunchConfig

__all__ = [
    "DEFAULT_FAILURE_EXIT_CODE",
    "DEFAULT_SHELL",
    "LauncherConfig",
    "ShellLaunchConfig",
]
