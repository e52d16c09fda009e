"""The report command: read, decode and print the limit reasons register."""

from __future__ import annotations

import logging
from typing import Optional

from perflimit.config import load_config
from perflimit.environment import EnvironmentCheckError, color_enabled, require_command, require_root
from perflimit.mmio import RegisterReadError, read_register
from perflimit.register_maps.decoder import decode
from perflimit.report import print_report, report_to_dict
from perflimit.cli.helpers import _print, _print_error

log = logging.getLogger(__name__)


def cmd_limits(
    *,
    address: str,
    color: Optional[str] = None,
    reader: Optional[str] = None,
    config_path: Optional[str] = None,
    json_mode: bool = False,
) -> int:
    """Read the register at *address* and print the decoded report.

    Nothing is printed to stdout unless the full 32-bit value was read.

    Args:
        address: MMIO address, already normalized to ``0x...``.
        color: ``auto``/``always``/``never``; None keeps the config value.
        reader: MMIO read command; None keeps the config value.
        config_path: Optional explicit config file.
        json_mode: Emit machine-parseable JSON instead of the text report.

    Returns:
        Exit code: 0 on success, 1 on any failure.
    """
    try:
        cfg = load_config(config_path).with_overrides(reader=reader, color=color)
    except (FileNotFoundError, ValueError) as exc:
        _print_error(str(exc), json_mode=json_mode)
        return 1

    try:
        require_command(cfg.reader)
        require_root()
        value = read_register(
            address,
            reader=cfg.reader,
            reader_args=cfg.reader_args,
            timeout_s=cfg.timeout_s,
        )
    except (EnvironmentCheckError, RegisterReadError) as exc:
        _print_error(str(exc), json_mode=json_mode)
        return 1

    report = decode(value)
    log.debug("Decoded %s: %d indicators triggered", report.hex_value, len(report.triggered()))

    if json_mode:
        out = report_to_dict(report)
        out["address"] = address
        _print(out, json_mode=True)
    else:
        print_report(report, color_enabled(cfg.color))
    return 0
