"""Script payload bundled into the package at build time."""

from importlib import resources

SCRIPT_RESOURCE = "cross.sh"


def load_payload(name: str = SCRIPT_RESOURCE) -> bytes:
    """Return the raw bytes of a script shipped as crossrun package data."""
    return resources.files("crossrun").joinpath(name).read_bytes()


EMBEDDED_SCRIPT: bytes = load_payload()
