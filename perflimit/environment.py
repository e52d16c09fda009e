"""Runtime environment checks: privilege, required tools, color support."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys
from typing import Optional, TextIO

logger = logging.getLogger(__name__)

COLOR_MODES = ("auto", "always", "never")
MIN_COLORS = 8


class EnvironmentCheckError(RuntimeError):
    """Raised when the process cannot run in the current environment."""


def require_root() -> None:
    """Fail unless running with an effective uid of 0 (MMIO needs /dev/mem)."""
    if os.geteuid() != 0:
        raise EnvironmentCheckError("must be run as root (reading MMIO requires /dev/mem access)")


def require_command(name: str) -> str:
    """Resolve *name* on PATH.

    Returns:
        Absolute path to the command.

    Raises:
        EnvironmentCheckError: If the command is not installed.
    """
    path = shutil.which(name)
    if path is None:
        raise EnvironmentCheckError(f"required command not found: {name}")
    logger.debug("Found %s at %s", name, path)
    return path


def terminal_colors() -> int:
    """Number of colors reported by ``tput colors``, 0 if unknown."""
    tput = shutil.which("tput")
    if tput is None:
        return 0
    try:
        result = subprocess.run(
            [tput, "colors"],
            capture_output=True,
            text=True,
            timeout=2.0,
        )
    except (OSError, subprocess.TimeoutExpired) as exc:
        logger.debug("tput colors failed: %s", exc)
        return 0
    if result.returncode != 0:
        return 0
    try:
        return int(result.stdout.strip())
    except ValueError:
        return 0


def color_enabled(mode: str = "auto", stream: Optional[TextIO] = None) -> bool:
    """Decide whether report output should be colored.

    Args:
        mode: ``always`` forces color, ``never`` disables it, ``auto``
            enables it when *stream* is a terminal, ``NO_COLOR`` is unset
            and the terminal supports at least 8 colors.
        stream: Output stream (stdout by default).

    Raises:
        ValueError: If *mode* is not a known color mode.
    """
    if mode not in COLOR_MODES:
        raise ValueError(f"invalid color mode: {mode!r} (expected one of {', '.join(COLOR_MODES)})")
    if mode == "always":
        return True
    if mode == "never":
        return False

    out = stream if stream is not None else sys.stdout
    if not getattr(out, "isatty", lambda: False)():
        return False
    if os.environ.get("NO_COLOR"):
        return False
    return terminal_colors() >= MIN_COLORS
