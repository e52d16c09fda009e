"""Data model for the frequency limit reasons register.

A single 32-bit register is split into two power/clock domains. Each bit
is described by a BitSpec; decoding a raw value produces one Indicator per
bit, collected into a Report in a fixed order.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

REGISTER_WIDTH = 32
REGISTER_MASK = (1 << REGISTER_WIDTH) - 1


class Domain(str, Enum):
    """Power/clock domain. Declaration order is report order."""

    PP1 = "PP1"
    PP0 = "PP0"

    @property
    def short_name(self) -> str:
        return _DOMAIN_SHORT_NAMES[self]

    @property
    def display_name(self) -> str:
        """Header text, e.g. ``PP1 (GT)``."""
        return f"{self.value} ({self.short_name})"


_DOMAIN_SHORT_NAMES = {
    Domain.PP1: "GT",
    Domain.PP0: "IA",
}


class Category(str, Enum):
    """Kind of indicator within a domain. Declaration order is report order."""

    FREQUENCY_STATUS = "frequency_status"
    LIMIT_CAUSE = "limit_cause"

    @property
    def heading(self) -> str:
        return _CATEGORY_HEADINGS[self]


_CATEGORY_HEADINGS = {
    Category.FREQUENCY_STATUS: "frequency status",
    Category.LIMIT_CAUSE: "reason",
}

RESERVED_LABEL = "reserved"


@dataclass(frozen=True)
class BitSpec:
    """A single named bit of the register."""

    name: str
    bit: int
    domain: Domain
    category: Category
    label: str = RESERVED_LABEL
    reserved: bool = False

    @property
    def mask(self) -> int:
        return 1 << self.bit

    def is_set(self, raw: int) -> bool:
        """True if this bit is set in *raw*."""
        return ((raw >> self.bit) & 1) != 0

    @property
    def sort_key(self) -> tuple[int, int, int]:
        # domain, then category, then highest bit first
        return (
            list(Domain).index(self.domain),
            list(Category).index(self.category),
            -self.bit,
        )


@dataclass(frozen=True)
class Indicator:
    """A BitSpec paired with its decoded state."""

    spec: BitSpec
    triggered: bool

    @property
    def bit(self) -> int:
        return self.spec.bit

    @property
    def marker(self) -> str:
        return "Y" if self.triggered else "N"


@dataclass(frozen=True)
class Report:
    """All indicators decoded from one register value, in report order."""

    value: int
    indicators: tuple[Indicator, ...]

    def __iter__(self) -> Iterator[Indicator]:
        return iter(self.indicators)

    def __len__(self) -> int:
        return len(self.indicators)

    @property
    def hex_value(self) -> str:
        return f"0x{self.value:08X}"

    def group(self, domain: Domain, category: Category) -> tuple[Indicator, ...]:
        """Indicators of one domain and category, highest bit first."""
        return tuple(
            ind for ind in self.indicators
            if ind.spec.domain is domain and ind.spec.category is category
        )

    def triggered(self) -> list[Indicator]:
        """Indicators whose bit is set."""
        return [ind for ind in self.indicators if ind.triggered]

    def indicator_for_bit(self, bit: int) -> Indicator | None:
        for ind in self.indicators:
            if ind.bit == bit:
                return ind
        return None
