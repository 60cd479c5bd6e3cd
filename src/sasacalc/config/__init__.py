"""Configuration models with FreeSASA's defaults."""

from sasacalc.config.schema import (
    Algorithm,
    CalculationParameters,
    SasaConfig,
    StructureOptions,
)

__all__ = [
    "SasaConfig",
    "StructureOptions",
    "CalculationParameters",
    "Algorithm",
]
