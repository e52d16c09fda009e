"""Report renderer: formats a decoded Report for humans or JSON.

Text layout, per domain (PP1 first, then PP0):

    PP1 (GT)
      frequency status
        31  clipped (below OS requested frequency)   N
      reason
        27  power limit 2 (PL2)                      Y

Domains are separated by a blank line. The renderer never probes the
terminal; the caller decides whether color is enabled.
"""

from __future__ import annotations

import sys
from typing import Any, Optional, TextIO

from perflimit.register_maps.base import Category, Domain, Indicator, Report

# Width of the "bit + label" column; markers line up after it.
LABEL_WIDTH = 44

INDENT_CATEGORY = "  "
INDENT_INDICATOR = "    "

# ANSI SGR sequences
BOLD = "\033[1m"
RESET = "\033[0m"
SAFE = "\033[32m"  # green
WARNING = "\033[31m"  # red


def _label_column(ind: Indicator) -> str:
    return f"{ind.bit:>2}  {ind.spec.label}".ljust(LABEL_WIDTH)


def format_indicator(ind: Indicator, color_enabled: bool) -> str:
    """Format one indicator line: padded label column, then Y/N marker."""
    label = _label_column(ind)
    if not color_enabled:
        return f"{INDENT_INDICATOR}{label} {ind.marker}"
    hue = WARNING if ind.triggered else SAFE
    return f"{INDENT_INDICATOR}{BOLD}{hue}{label}{RESET} {hue}{ind.marker}{RESET}"


def render(report: Report, color_enabled: bool) -> str:
    """Render *report* as multi-line text.

    Args:
        report: Decoded report.
        color_enabled: Wrap lines in ANSI color. When False the output
            contains no escape sequences and the Y/N marker is the only
            signal.

    Returns:
        Report text without a trailing newline.
    """
    blocks = []
    for domain in Domain:
        lines = [domain.display_name]
        for category in Category:
            lines.append(f"{INDENT_CATEGORY}{category.heading}")
            for ind in report.group(domain, category):
                lines.append(format_indicator(ind, color_enabled))
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def print_report(report: Report, color_enabled: bool, stream: Optional[TextIO] = None) -> None:
    """Write the rendered report to *stream* (stdout by default)."""
    out = stream if stream is not None else sys.stdout
    out.write(render(report, color_enabled) + "\n")
    out.flush()


def report_to_dict(report: Report) -> dict[str, Any]:
    """JSON-friendly view of a report, grouped like the text output."""
    domains: list[dict[str, Any]] = []
    for domain in Domain:
        entry: dict[str, Any] = {"domain": domain.value, "display_name": domain.display_name}
        for category in Category:
            entry[category.value] = [
                {
                    "bit": ind.bit,
                    "name": ind.spec.name,
                    "label": ind.spec.label,
                    "reserved": ind.spec.reserved,
                    "triggered": ind.triggered,
                }
                for ind in report.group(domain, category)
            ]
        domains.append(entry)

    return {
        "value": report.hex_value,
        "triggered": [ind.spec.name for ind in report.triggered()],
        "domains": domains,
    }
