"""
Configuration schema for SASA calculations.

This module defines Pydantic models for the structure-loading options and
calculation parameters handed to FreeSASA. Every default equals the
library's own default, so ``SasaConfig()`` reproduces a plain
``freesasa.calc(freesasa.Structure(path))`` call.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, Field, model_validator


class Algorithm(str, Enum):
    """Surface-area algorithms provided by FreeSASA."""

    LEE_RICHARDS = "LeeRichards"
    SHRAKE_RUPLEY = "ShrakeRupley"


# =============================================================================
# Structure Loading
# =============================================================================


class StructureOptions(BaseModel):
    """Options controlling how a PDB file is turned into a structure.

    Attributes:
        include_hetatm: Include HETATM records
        include_hydrogen: Include hydrogen atoms
        join_models: Read all MODELs into one structure
        skip_unknown: Skip atoms the classifier does not know
        halt_at_unknown: Reject the file at the first unknown atom
    """

    include_hetatm: bool = Field(False, description="Include HETATM records")
    include_hydrogen: bool = Field(False, description="Include hydrogen atoms")
    join_models: bool = Field(False, description="Join all MODELs into one structure")
    skip_unknown: bool = Field(False, description="Skip atoms with unknown radius")
    halt_at_unknown: bool = Field(False, description="Fail at the first unknown atom")

    @model_validator(mode="after")
    def validate_unknown_handling(self) -> "StructureOptions":
        """Unknown atoms can be skipped or fatal, not both."""
        if self.skip_unknown and self.halt_at_unknown:
            raise ValueError("skip_unknown and halt_at_unknown are mutually exclusive")
        return self

    def to_freesasa(self) -> Dict[str, bool]:
        """Return the option dictionary accepted by ``freesasa.Structure``."""
        return {
            "hetatm": self.include_hetatm,
            "hydrogen": self.include_hydrogen,
            "join-models": self.join_models,
            "skip-unknown": self.skip_unknown,
            "halt-at-unknown": self.halt_at_unknown,
        }


# =============================================================================
# Calculation Parameters
# =============================================================================


class CalculationParameters(BaseModel):
    """Parameters of the surface-area calculation.

    Attributes:
        algorithm: Lee-Richards or Shrake-Rupley
        probe_radius: Probe radius in Angstrom (water)
        n_slices: Slices per atom (Lee-Richards only)
        n_points: Test points per atom (Shrake-Rupley only)
        n_threads: Threads used inside the library for one structure
    """

    algorithm: Algorithm = Field(Algorithm.LEE_RICHARDS, description="SASA algorithm")
    probe_radius: float = Field(1.4, gt=0.0, description="Probe radius (Angstrom)")
    n_slices: int = Field(20, ge=1, description="Lee-Richards slices per atom")
    n_points: int = Field(100, ge=1, description="Shrake-Rupley points per atom")
    n_threads: int = Field(1, ge=1, description="Library worker threads")

    def to_dict(self) -> Dict[str, Any]:
        """Return the parameter dictionary in FreeSASA's key format."""
        return {
            "algorithm": self.algorithm.value,
            "probe-radius": self.probe_radius,
            "n-slices": self.n_slices,
            "n-points": self.n_points,
            "n-threads": self.n_threads,
        }

    def is_default(self) -> bool:
        """True if every field still has its library-default value."""
        return self == CalculationParameters()

    def to_freesasa(self):
        """Build the ``parameters`` argument for ``freesasa.calc``.

        Returns None for the default parameters, which makes FreeSASA use its
        own compiled-in defaults rather than a copy of them.
        """
        import freesasa

        if self.is_default():
            return None
        return freesasa.Parameters(self.to_dict())


# =============================================================================
# Top-level
# =============================================================================


class SasaConfig(BaseModel):
    """Complete configuration for one SASA run.

    The classifier is not part of the configuration: structures are always
    classified with FreeSASA's default (ProtOr) classifier.

    Example:
        >>> config = SasaConfig(parameters={"probe_radius": 1.2})
        >>> config.structure.include_hetatm
        False
    """

    structure: StructureOptions = Field(default_factory=StructureOptions)
    parameters: CalculationParameters = Field(default_factory=CalculationParameters)
