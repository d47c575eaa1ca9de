"""Logging setup for toolpath entry points."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(debug: bool = False) -> None:
    """Send toolpath logs to stderr.

    stdout is left untouched because the MCP server speaks its protocol there.
    """
    root = logging.getLogger("toolpath")
    root.setLevel(logging.DEBUG if debug else logging.INFO)

    if not any(getattr(h, "_toolpath", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._toolpath = True  # type: ignore[attr-defined]
        root.addHandler(handler)
