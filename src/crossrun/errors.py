"""Launcher failure taxonomy.

A child exiting non-zero is not a launcher failure; these cover only the
cases where the launcher itself could not do its job.
"""


class LauncherError(Exception):
    """Base class for failures of the launcher itself."""

    summary = "Launcher failure"

    def __init__(self, reason: object) -> None:
        super().__init__(reason)
        self.reason = reason

    def __str__(self) -> str:
        return f"{self.summary}: {self.reason}"


class SetupError(LauncherError):
    summary = "Failed to create stdin pipe"


class LaunchError(LauncherError):
    summary = "Failed to start shell"


class TransferError(LauncherError):
    summary = "Failed to write script"


class CompletionError(LauncherError):
    summary = "Failed to execute script"
