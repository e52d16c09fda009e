"""Argument parser for the perflimit CLI."""

from __future__ import annotations

import argparse
import sys

from perflimit import __version__
from perflimit.environment import COLOR_MODES


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _parse_address(text: str) -> str:
    """Accept a hex or decimal address and normalize it to ``0x...``."""
    try:
        value = int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid address: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"invalid address: {text!r}")
    return f"0x{value:X}"


def _build_parser() -> argparse.ArgumentParser:
    """Build the perflimit argument parser."""
    parser = _Parser(
        prog="perflimit",
        description="Explain why the PP0 (IA) and PP1 (GT) domains run below maximum frequency.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__} (perf-limit-reasons)",
    )
    parser.add_argument(
        "address",
        type=_parse_address,
        help="Physical MMIO address of the limit reasons register (hex or decimal)",
    )
    parser.add_argument(
        "--color",
        choices=COLOR_MODES,
        default=None,
        help="Force color on or off (default: config value, else auto)",
    )
    parser.add_argument("--json", action="store_true", help="Output machine-parseable JSON")
    parser.add_argument("--reader", default=None, help="MMIO read command (default: devmem2)")
    parser.add_argument("--config", dest="config_path", default=None, help="Path to config.yaml")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")
    return parser
