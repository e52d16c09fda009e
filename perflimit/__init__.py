"""
perf-limit-reasons - explain why the CPU runs below maximum frequency.

Reads the frequency limit reasons register through an external MMIO tool,
decodes all 32 bits for the PP1 (GT) and PP0 (IA) domains and prints a
Y/N report.
"""

from .register_maps import BitSpec, Category, Domain, Indicator, Report, load_layout
from .register_maps.decoder import decode
from .report import print_report, render, report_to_dict

__version__ = "1.0.0"

__all__ = [
    "BitSpec",
    "Category",
    "Domain",
    "Indicator",
    "Report",
    "load_layout",
    "decode",
    "render",
    "print_report",
    "report_to_dict",
    "__version__",
]
