"""Environment-driven configuration for crossrun.

The launcher forwards every command-line argument to the script, so all of
its own settings come from ``CROSSRUN_*`` environment variables.
"""

import os

from crossrun.models import LauncherConfig

SHELL_ENV = "CROSSRUN_SHELL"
DEBUG_ENV = "CROSSRUN_DEBUG"
FAILURE_EXIT_CODE_ENV = "CROSSRUN_FAILURE_EXIT_CODE"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY


def load_config() -> LauncherConfig:
    """Build a LauncherConfig from the environment, falling back to defaults.

    Raises pydantic.ValidationError when a value is present but invalid.
    """
    overrides: dict[str, object] = {}

    shell = os.environ.get(SHELL_ENV, "").strip()
    if shell:
        overrides["shell"] = shell

    failure_code = os.environ.get(FAILURE_EXIT_CODE_ENV, "").strip()
    if failure_code:
        overrides["failure_exit_code"] = failure_code

    if _env_flag(DEBUG_ENV):
        overrides["debug"] = True

    return LauncherConfig(**overrides)
