"""Shell invocation for the embedded script."""

from crossrun.shell.detection import STDIN_SCRIPT_FLAGS, build_launch_config

__all__ = [
    "STDIN_SCRIPT_FLAGS",
    "build_launch_config",
]
