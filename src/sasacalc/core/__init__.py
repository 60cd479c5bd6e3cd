"""Error types and logging helpers shared by the driver and the CLI."""

from sasacalc.core.errors import (
    CalculationError,
    HandleReleasedError,
    SasaError,
    SelectionError,
    StructureOpenError,
    StructureParseError,
)
from sasacalc.core.logging_utils import setup_logging

__all__ = [
    "SasaError",
    "StructureOpenError",
    "StructureParseError",
    "CalculationError",
    "SelectionError",
    "HandleReleasedError",
    "setup_logging",
]
