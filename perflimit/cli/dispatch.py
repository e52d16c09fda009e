"""Command dispatch for the perflimit CLI."""

from __future__ import annotations

import sys
from typing import Optional

from perflimit.cli.parser import _build_parser
from perflimit.cli.helpers import _setup_logging


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point for the ``perflimit`` CLI.

    Args:
        argv: Argument list to parse.  Defaults to ``sys.argv[1:]``.

    Returns:
        Exit code: 0 on success, 1 on any error.
    """
    if argv is None:
        argv = sys.argv[1:]

    # Late import to allow tests to monkeypatch perflimit.cli.cmd_limits
    import perflimit.cli as cli

    parser = _build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    return cli.cmd_limits(
        address=args.address,
        color=args.color,
        reader=args.reader,
        config_path=args.config_path,
        json_mode=args.json,
    )
