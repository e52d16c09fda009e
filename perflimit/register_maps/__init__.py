"""Register layout loader — loads the packaged JSON layout into BitSpecs.

Usage:
    from perflimit.register_maps import load_layout

    table = load_layout()
    prochot = next(s for s in table if s.name == "PP0_PROCHOT")
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Iterable

from .base import (
    REGISTER_WIDTH,
    RESERVED_LABEL,
    BitSpec,
    Category,
    Domain,
    Indicator,
    Report,
)

__all__ = [
    "load_layout",
    "validate_table",
    "BitSpec",
    "Category",
    "Domain",
    "Indicator",
    "Report",
]

# Directory containing the JSON layout file
_MAPS_DIR = Path(__file__).parent

DEFAULT_LAYOUT = "perf_limit_reasons"


def _parse_bit_spec(name: str, definition: dict) -> BitSpec:
    """Parse a single bit definition from JSON."""
    reserved = bool(definition.get("reserved", False))
    return BitSpec(
        name=name,
        bit=int(definition["bit"]),
        domain=Domain(definition["domain"]),
        category=Category(definition["category"]),
        label=RESERVED_LABEL if reserved else definition.get("description", name),
        reserved=reserved,
    )


def validate_table(table: Iterable[BitSpec]) -> None:
    """Check that *table* covers every register bit exactly once.

    Raises:
        ValueError: If a bit is out of range, duplicated or missing.
    """
    seen: dict[int, str] = {}
    for spec in table:
        if not 0 <= spec.bit < REGISTER_WIDTH:
            raise ValueError(f"{spec.name}: bit {spec.bit} outside 0..{REGISTER_WIDTH - 1}")
        if spec.bit in seen:
            raise ValueError(f"bit {spec.bit} defined twice ({seen[spec.bit]}, {spec.name})")
        seen[spec.bit] = spec.name

    missing = sorted(set(range(REGISTER_WIDTH)) - set(seen))
    if missing:
        raise ValueError(f"bits not covered by layout: {missing}")


@lru_cache(maxsize=None)
def load_layout(name: str = DEFAULT_LAYOUT) -> tuple[BitSpec, ...]:
    """Load and validate a register layout.

    The result is cached, so the table is built once per process.

    Args:
        name: Layout name matching a JSON file in this package.

    Returns:
        Tuple of BitSpecs in report order (PP1 before PP0, status before
        cause, highest bit first).

    Raises:
        FileNotFoundError: If no JSON file exists for the layout.
        ValueError: If the layout does not cover all 32 bits exactly once.
    """
    json_path = _MAPS_DIR / f"{name}.json"
    if not json_path.exists():
        raise FileNotFoundError(
            f"No register layout '{name}'. "
            f"Expected: {json_path}"
        )

    with open(json_path, encoding="utf-8") as f:
        data = json.load(f)

    specs = [_parse_bit_spec(key, value) for key, value in data.get("bits", {}).items()]
    validate_table(specs)
    return tuple(sorted(specs, key=lambda s: s.sort_key))


def available_layouts() -> list[str]:
    """List packaged layout names."""
    return [p.stem for p in _MAPS_DIR.glob("*.json")]
