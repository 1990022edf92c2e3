"""crossrun: run a bundled shell script with transparent stdio and exit codes."""

__version__ = "0.1.0"
