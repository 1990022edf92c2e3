"""Configuration model for crossrun."""

from pydantic import BaseModel, Field

DEFAULT_SHELL = "bash"
DEFAULT_FAILURE_EXIT_CODE = 1


class LauncherConfig(BaseModel):
    """Runtime configuration for crossrun."""

    shell: str = DEFAULT_SHELL
    failure_exit_code: int = Field(default=DEFAULT_FAILURE_EXIT_CODE, ge=1, le=255)
    debug: bool = False
