"""Shell launch model for the launcher."""

from dataclasses import dataclass


@dataclass
class ShellLaunchConfig:
    """How to start the shell that reads the payload from stdin."""

    executable: str
    argv: list[str]
