"""
perflimit: CLI for the frequency limit reasons report.

Usage:
    perflimit [--color {auto,always,never}] [--json] [--reader CMD] ADDRESS

Checks that the MMIO reader is installed and that the process runs as
root, reads the register once, then prints the decoded report.

Entry points:
- perflimit: console script (installed via pip)
- Can also be imported and called programmatically via main(argv)
"""

from __future__ import annotations

from perflimit.cli.helpers import _print, _print_error
from perflimit.cli.limits_cmd import cmd_limits
from perflimit.cli.dispatch import main

__all__ = ["main", "cmd_limits", "_print", "_print_error"]
