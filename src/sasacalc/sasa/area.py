"""Surface-area value types: classified summary, per-atom, per-residue and per-chain areas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

# Class names used by FreeSASA's classifiers
POLAR_CLASS = "Polar"
APOLAR_CLASS = "Apolar"


@dataclass(frozen=True)
class ClassifiedArea:
    """Total, non-polar and polar SASA of one structure, in Å².

    Values are taken from FreeSASA as they are. Atoms the classifier puts
    in neither class (``"Unknown"``) contribute to ``total`` only.

    Attributes
    ----------
    total : float
        Total solvent-accessible surface area.
    apolar : float
        Area of atoms classified as apolar.
    polar : float
        Area of atoms classified as polar.
    """

    total: float
    apolar: float
    polar: float

    @classmethod
    def from_classes(cls, total: float, classes: Mapping[str, float]) -> "ClassifiedArea":
        """Build from a total and a ``{class_name: area}`` mapping.

        Parameters
        ----------
        total : float
            Total area, as reported by ``Result.totalArea()``.
        classes : Mapping[str, float]
            Per-class areas, as returned by ``freesasa.classifyResults``.
            Missing classes count as zero.
        """
        return cls(
            total=float(total),
            apolar=float(classes.get(APOLAR_CLASS, 0.0)),
            polar=float(classes.get(POLAR_CLASS, 0.0)),
        )


def format_area_block(path: str, area: ClassifiedArea) -> str:
    """Render one report block, ending with a blank line.

    >>> print(format_area_block("1ubq.pdb", ClassifiedArea(5000.0, 3000.0, 2000.0)), end="")
    Structure: 1ubq.pdb
    Total SASA:     5000.0
    Non-polar SASA: 3000.0
    Polar SASA:     2000.0
    <BLANKLINE>
    """
    return (
        f"Structure: {path}\n"
        f"Total SASA:     {area.total}\n"
        f"Non-polar SASA: {area.apolar}\n"
        f"Polar SASA:     {area.polar}\n"
        "\n"
    )


@dataclass(frozen=True)
class AtomArea:
    """SASA of a single atom, with the labels FreeSASA read for it."""

    index: int
    chain: str
    residue_number: str
    residue_name: str
    atom_name: str
    radius: float
    area: float


@dataclass(frozen=True)
class ResidueArea:
    """Absolute and relative SASA of one residue.

    Attributes
    ----------
    chain : str
        Chain label.
    residue_number : str
        Residue number as written in the PDB file, including insertion code.
    residue_name : str
        3-letter residue name.
    total, apolar, polar, main_chain, side_chain : float
        Absolute areas in Å².
    relative_total : float or None
        ``total`` relative to the residue's reference area. None for
        residue types FreeSASA has no reference value for (ligands, waters).
    """

    chain: str
    residue_number: str
    residue_name: str
    total: float
    apolar: float
    polar: float
    main_chain: float
    side_chain: float
    relative_total: Optional[float] = None

    @property
    def unknown(self) -> float:
        """Area of atoms classified as neither polar nor apolar."""
        return self.total - self.apolar - self.polar


@dataclass(frozen=True)
class ChainArea:
    """SASA of one chain, summed over its residues."""

    chain: str
    n_residues: int
    total: float
    apolar: float
    polar: float
    main_chain: float
    side_chain: float

    @property
    def unknown(self) -> float:
        return self.total - self.apolar - self.polar

    @classmethod
    def from_residues(cls, chain: str, residues: Sequence[ResidueArea]) -> "ChainArea":
        return cls(
            chain=chain,
            n_residues=len(residues),
            total=sum(r.total for r in residues),
            apolar=sum(r.apolar for r in residues),
            polar=sum(r.polar for r in residues),
            main_chain=sum(r.main_chain for r in residues),
            side_chain=sum(r.side_chain for r in residues),
        )
