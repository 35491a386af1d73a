from __future__ import annotations

import logging


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    # keep httpx quiet unless asked
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.DEBUG if verbose else logging.WARNING)


def enable_wire_debug() -> None:
    """Show the client's request/response dump even without --verbose."""
    logging.getLogger("jabber_rpc").setLevel(logging.DEBUG)
