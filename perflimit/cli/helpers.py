"""Shared utilities for perflimit CLI commands."""

from __future__ import annotations

import json
import logging
import sys
from typing import Any


def _print(obj: Any, *, json_mode: bool) -> None:
    if json_mode:
        print(json.dumps(obj, indent=2, sort_keys=True))
    else:
        if isinstance(obj, str):
            print(obj)
        else:
            print(json.dumps(obj, indent=2, sort_keys=True))


def _print_error(message: str, *, json_mode: bool) -> None:
    """Report a failure: JSON object on stdout, or ``ERROR:`` line on stderr."""
    if json_mode:
        _print({"error": message}, json_mode=True)
    else:
        print(f"ERROR: {message}", file=sys.stderr)


def _setup_logging(verbose: bool) -> None:
    """Send log records to stderr; stdout is reserved for the report."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )
