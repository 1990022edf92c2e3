"""Command-line interface for crossrun."""

import logging
import sys

from pydantic import ValidationError

from crossrun.config import load_config
from crossrun.launcher import run
from crossrun.payload import EMBEDDED_SCRIPT

log = logging.getLogger("crossrun")

CONFIG_ERROR_EXIT_CODE = 1


def main(argv: list[str] | None = None, payload: bytes = EMBEDDED_SCRIPT) -> int:
    """Run the embedded script, forwarding ``argv`` untouched."""
    args = list(sys.argv[1:] if argv is None else argv)

    try:
        config = load_config()
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return CONFIG_ERROR_EXIT_CODE

    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )
    log.debug("forwarding %d argument(s)", len(args))

    return run(args, payload, config)


def entrypoint() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())
