"""Scoped handles over FreeSASA structures and results.

A structure handle owns one parsed ``freesasa.Structure``; a result handle
owns the ``freesasa.Result`` computed from it. Both are released explicitly,
and both are context managers so they are released on every exit path.
Nesting the result scope inside the structure scope releases the result
first, which is required because a result is only meaningful together with
the structure it was computed from.

Usage
-----
>>> with StructureHandle.from_path("1ubq.pdb") as structure:
...     with structure.compute() as result:
...         area = result.classify()
...         per_chain = result.chain_areas()
...         selected = result.select({"alanines": "resn ala"})
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Mapping, Optional, Union

from sasacalc.core.errors import (
    CalculationError,
    HandleReleasedError,
    SelectionError,
    StructureOpenError,
    StructureParseError,
)
from sasacalc.sasa.area import AtomArea, ChainArea, ClassifiedArea, ResidueArea

if TYPE_CHECKING:
    from sasacalc.config.schema import CalculationParameters, StructureOptions

logger = logging.getLogger(__name__)

# ``None`` makes FreeSASA fall back to its default (ProtOr) classifier
DEFAULT_CLASSIFIER = None


@dataclass(frozen=True)
class AtomRecord:
    """One atom for building a structure without a PDB file.

    ``name`` follows PDB column alignment (``" CA "``), which is what the
    classifier matches against.
    """

    name: str
    residue_name: str
    residue_number: Union[int, str]
    chain: str
    x: float
    y: float
    z: float


class _Handle:
    """Common release bookkeeping for structure and result handles."""

    kind = "handle"

    def __init__(self, path: str, obj: Any) -> None:
        self.path = path
        self._obj = obj

    @property
    def released(self) -> bool:
        return self._obj is None

    def _require(self) -> Any:
        if self._obj is None:
            raise HandleReleasedError(f"{self.kind} for {self.path} has already been released")
        return self._obj

    def release(self) -> None:
        """Drop the library object. Releasing twice is a no-op."""
        if self._obj is None:
            return
        self._obj = None
        logger.debug(f"Released {self.kind} for {self.path}")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __repr__(self) -> str:
        state = "released" if self.released else "live"
        return f"<{type(self).__name__} {self.path!r} ({state})>"


class StructureHandle(_Handle):
    """A parsed molecular structure."""

    kind = "structure"

    @classmethod
    def from_path(
        cls,
        path: Union[str, Path],
        options: Optional["StructureOptions"] = None,
    ) -> "StructureHandle":
        """Open and parse a PDB file.

        The file is opened once here only to report unreadable paths as
        :class:`StructureOpenError`; FreeSASA then opens it again by name.
        A file replaced between the two opens is parsed in its new state.

        Parameters
        ----------
        path : str or Path
            Structure file. Kept verbatim for reporting.
        options : StructureOptions, optional
            Loading options. Library defaults if None.

        Raises
        ------
        StructureOpenError
            If the file cannot be opened for reading.
        StructureParseError
            If FreeSASA cannot build a structure from it.
        """
        import freesasa

        from sasacalc.config.schema import StructureOptions as _StructureOptions

        if options is None:
            options = _StructureOptions()

        path = str(path)
        try:
            with open(path, "rb"):
                pass
        except OSError as exc:
            raise StructureOpenError(path, exc.strerror or str(exc)) from exc

        try:
            structure = freesasa.Structure(path, DEFAULT_CLASSIFIER, options.to_freesasa())
        except Exception as exc:
            raise StructureParseError(path) from exc

        logger.debug(f"Loaded {path}: {structure.nAtoms()} atoms")
        return cls(path, structure)

    @classmethod
    def from_atoms(cls, atoms: Iterable[AtomRecord], name: str = "Unnamed") -> "StructureHandle":
        """Build a structure atom by atom.

        Radii are assigned by the default classifier as each atom is added.

        Parameters
        ----------
        atoms : iterable of AtomRecord
            Atoms in structure order.
        name : str
            Label used in place of a path in reports and errors.

        Raises
        ------
        StructureParseError
            If FreeSASA rejects an atom, or no atoms were given.
        """
        import freesasa

        structure = freesasa.Structure()
        n_added = 0
        for atom in atoms:
            try:
                structure.addAtom(
                    atom.name,
                    atom.residue_name,
                    str(atom.residue_number),
                    atom.chain,
                    atom.x,
                    atom.y,
                    atom.z,
                )
            except Exception as exc:
                raise StructureParseError(name) from exc
            n_added += 1

        if n_added == 0:
            raise StructureParseError(name)

        logger.debug(f"Built {name}: {n_added} atoms")
        return cls(name, structure)

    @property
    def structure(self):
        """The underlying ``freesasa.Structure``."""
        return self._require()

    def n_atoms(self) -> int:
        """Number of atoms FreeSASA kept after applying the loading options."""
        return self.structure.nAtoms()

    def compute(self, parameters: Optional["CalculationParameters"] = None) -> "ResultHandle":
        """Calculate SASA for this structure.

        Raises
        ------
        CalculationError
            If FreeSASA fails to produce a result.
        """
        import freesasa

        from sasacalc.config.schema import CalculationParameters as _CalculationParameters

        if parameters is None:
            parameters = _CalculationParameters()

        structure = self.structure
        try:
            result = freesasa.calc(structure, parameters.to_freesasa())
        except Exception as exc:
            raise CalculationError(self.path) from exc

        return ResultHandle(self, result)


class ResultHandle(_Handle):
    """Per-atom surface areas computed from a structure handle."""

    kind = "result"

    def __init__(self, structure: StructureHandle, result: Any) -> None:
        super().__init__(structure.path, result)
        self._structure = structure

    @property
    def result(self):
        """The underlying ``freesasa.Result``."""
        return self._require()

    def classify(self) -> ClassifiedArea:
        """Sum atom areas into total, apolar and polar components."""
        import freesasa

        result = self.result
        classes = freesasa.classifyResults(result, self._structure.structure)
        return ClassifiedArea.from_classes(result.totalArea(), classes)

    def atom_area(self, index: int) -> float:
        """SASA of atom *index* (0-based, structure order), in Å².

        Raises
        ------
        IndexError
            If *index* is outside the structure.
        """
        result = self.result
        if not 0 <= index < result.nAtoms():
            raise IndexError(f"Atom index {index} out of range for {self.path}")
        return result.atomArea(index)

    def atom_areas(self) -> List[AtomArea]:
        """SASA of every atom, labelled with chain, residue and atom name."""
        result = self.result
        structure = self._structure.structure
        return [
            AtomArea(
                index=i,
                chain=structure.chainLabel(i),
                residue_number=structure.residueNumber(i).strip(),
                residue_name=structure.residueName(i).strip(),
                atom_name=structure.atomName(i).strip(),
                radius=structure.radius(i),
                area=result.atomArea(i),
            )
            for i in range(structure.nAtoms())
        ]

    def residue_areas(self) -> List[ResidueArea]:
        """Per-residue SASA, chains and residues in structure order."""
        residues = []
        for chain, chain_residues in self.result.residueAreas().items():
            for number, res in chain_residues.items():
                residues.append(
                    ResidueArea(
                        chain=chain,
                        residue_number=str(number).strip(),
                        residue_name=res.residueType.strip(),
                        total=res.total,
                        apolar=res.apolar,
                        polar=res.polar,
                        main_chain=res.mainChain,
                        side_chain=res.sideChain,
                        relative_total=res.relativeTotal if res.hasRelativeAreas else None,
                    )
                )
        return residues

    def chain_areas(self) -> Dict[str, ChainArea]:
        """Per-chain SASA, keyed by chain label in structure order."""
        by_chain: Dict[str, List[ResidueArea]] = {}
        for residue in self.residue_areas():
            by_chain.setdefault(residue.chain, []).append(residue)
        return {
            chain: ChainArea.from_residues(chain, residues)
            for chain, residues in by_chain.items()
        }

    def select(self, selections: Mapping[str, str]) -> Dict[str, float]:
        """Total SASA of atoms matched by PyMOL-style selection expressions.

        Parameters
        ----------
        selections : Mapping[str, str]
            ``{name: expression}``, e.g. ``{"polar_res": "resn ser+thr+asn+gln"}``.

        Returns
        -------
        Dict[str, float]
            Area per selection name, in the order given.

        Raises
        ------
        SelectionError
            If FreeSASA cannot parse an expression.
        """
        import freesasa

        result = self.result
        structure = self._structure.structure
        areas = {}
        for name, expression in selections.items():
            try:
                selected = freesasa.selectArea([f"{name}, {expression}"], structure, result)
            except Exception as exc:
                raise SelectionError(self.path, name, expression) from exc
            areas[name] = selected[name]
        return areas

    def release(self) -> None:
        super().release()
        self._structure = None
