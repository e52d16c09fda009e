"""Bit-field decoder — turns a raw register value into a Report.

Takes the integer read by the MMIO reader and evaluates every BitSpec of
the layout against it. No I/O, no logging.
"""

from __future__ import annotations

from typing import Optional, Sequence

from . import load_layout
from .base import REGISTER_MASK, BitSpec, Indicator, Report


def decode(value: int, table: Optional[Sequence[BitSpec]] = None) -> Report:
    """Decode a raw register value.

    Args:
        value: 32-bit unsigned register value.
        table: Layout to decode with. Defaults to the packaged layout.

    Returns:
        Report with one Indicator per BitSpec, PP1 before PP0, frequency
        status before limit causes, highest bit first.

    Raises:
        ValueError: If *value* does not fit in 32 bits.
    """
    if not 0 <= value <= REGISTER_MASK:
        raise ValueError(f"register value out of range: {value:#x}")
    if table is None:
        table = load_layout()

    indicators = tuple(
        Indicator(spec=spec, triggered=spec.is_set(value))
        for spec in sorted(table, key=lambda s: s.sort_key)
    )
    return Report(value=value, indicators=indicators)
