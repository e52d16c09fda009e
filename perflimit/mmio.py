"""Register acquisition through an external MMIO tool.

The register is never read in-process. A tool such as ``devmem2`` or
``busybox devmem`` is run once with the address, and the value is parsed
from its output. Any failure is fatal; there is no retry.
"""

from __future__ import annotations

import logging
import re
import subprocess
from typing import Sequence

from perflimit.register_maps.base import REGISTER_MASK

logger = logging.getLogger(__name__)

DEFAULT_READER = "devmem2"
DEFAULT_READER_ARGS: tuple[str, ...] = ("w",)
DEFAULT_TIMEOUT_S = 5.0

# devmem2:        "Value at address 0xFED159A0 (0x7f1c2a3b59a0): 0x80000001"
# busybox devmem: "0x80000001"
_HEX_TOKEN = re.compile(r"0[xX]([0-9a-fA-F]+)")


class RegisterReadError(RuntimeError):
    """Raised when the register value cannot be obtained."""


def parse_reader_output(output: str) -> int:
    """Extract the register value from MMIO tool output.

    Takes the last ``0x...`` token on the last non-empty line.

    Raises:
        RegisterReadError: If no value is found or it exceeds 32 bits.
    """
    lines = [line.strip() for line in output.splitlines() if line.strip()]
    if not lines:
        raise RegisterReadError("MMIO reader produced no output")

    tokens = _HEX_TOKEN.findall(lines[-1])
    if not tokens:
        raise RegisterReadError(f"Could not parse register value from: {lines[-1]!r}")

    value = int(tokens[-1], 16)
    if value > REGISTER_MASK:
        raise RegisterReadError(f"Register value 0x{value:X} is wider than 32 bits")
    return value


def read_register(
    address: str,
    *,
    reader: str = DEFAULT_READER,
    reader_args: Sequence[str] = DEFAULT_READER_ARGS,
    timeout_s: float = DEFAULT_TIMEOUT_S,
) -> int:
    """Read a 32-bit register at *address* with an external tool.

    Args:
        address: Physical address, passed to the tool verbatim.
        reader: Tool to run (name on PATH or absolute path).
        reader_args: Extra arguments placed after the address
            (``w`` selects a 32-bit word access for devmem2).
        timeout_s: Seconds before the tool is considered hung.

    Returns:
        The register value.

    Raises:
        RegisterReadError: If the tool cannot be run, fails, times out,
            or prints something that is not a 32-bit value.
    """
    cmd = [reader, address, *reader_args]
    logger.debug("Running: %s", " ".join(cmd))

    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=timeout_s,
        )
    except FileNotFoundError as exc:
        raise RegisterReadError(f"MMIO reader not found: {reader}") from exc
    except subprocess.TimeoutExpired as exc:
        raise RegisterReadError(f"MMIO reader timed out after {timeout_s}s") from exc
    except OSError as exc:
        raise RegisterReadError(f"Could not run {reader}: {exc}") from exc

    if result.returncode != 0:
        detail = (result.stderr or result.stdout or "").strip()[:200]
        raise RegisterReadError(
            f"{reader} exited with status {result.returncode}" + (f": {detail}" if detail else "")
        )

    value = parse_reader_output(result.stdout)
    logger.debug("Register at %s = 0x%08X", address, value)
    return value
