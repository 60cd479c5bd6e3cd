"""SASA computation over the FreeSASA library.

Key classes
-----------
ClassifiedArea
    Total, apolar and polar SASA of one structure.
AtomArea, ResidueArea, ChainArea
    Per-atom, per-residue and per-chain breakdowns.
StructureHandle, ResultHandle
    Scoped wrappers over FreeSASA structures and results.
AtomRecord
    One atom for building a structure without a PDB file.

Key functions
-------------
compute_area
    Classified SASA of one structure file.
iter_areas
    Fail-fast, in-order SASA over many files.
format_area_block
    Text report block for one structure.
"""

from sasacalc.sasa.area import (
    AtomArea,
    ChainArea,
    ClassifiedArea,
    ResidueArea,
    format_area_block,
)
from sasacalc.sasa.driver import compute_area, iter_areas
from sasacalc.sasa.handles import AtomRecord, ResultHandle, StructureHandle

__all__ = [
    "ClassifiedArea",
    "AtomArea",
    "ResidueArea",
    "ChainArea",
    "format_area_block",
    "compute_area",
    "iter_areas",
    "StructureHandle",
    "ResultHandle",
    "AtomRecord",
]
