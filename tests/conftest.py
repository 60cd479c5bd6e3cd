"""Shared fixtures.

``fake_freesasa`` installs a minimal stand-in for the FreeSASA bindings in
``sys.modules`` so driver and CLI tests run without the compiled library.
A fake structure file is a text file with one line::

    AREAS <total> <apolar> <polar>

Any other content is rejected as unparseable; a ``FAILCALC`` line makes the
calculation fail. Each fake structure holds a single alanine CA atom in
chain A that carries the whole area.

The fake mirrors the parameter checks of a FreeSASA build without thread
support: ``Parameters`` with ``n-threads`` above 1 is rejected.
"""

from __future__ import annotations

import sys
import types
from pathlib import Path

import pytest


class _FakeStructure:
    def __init__(self, fileName=None, classifier=None, options=None):
        self.fileName = fileName
        self.classifier = classifier
        self.options = options
        self.atoms = []
        self.total = self.apolar = self.polar = 0.0
        self.fail_calc = False
        if fileName is None:
            return
        lines = Path(fileName).read_text().split("\n")
        areas = [line.split() for line in lines if line.startswith("AREAS")]
        if not areas:
            raise Exception(f"Error reading '{fileName}'.")
        self.total, self.apolar, self.polar = (float(v) for v in areas[0][1:4])
        self.fail_calc = "FAILCALC" in lines
        self.atoms.append((" CA ", "ALA", "   1", "A"))

    def addAtom(self, atomName, residueName, residueNumber, chainLabel, x, y, z):
        if residueName.strip() == "XXX":
            raise Exception(f"Unknown residue '{residueName}'")
        self.atoms.append((atomName, residueName, residueNumber, chainLabel))
        self.total += 10.0
        self.apolar += 10.0

    def nAtoms(self):
        return len(self.atoms)

    def atomName(self, i):
        return self.atoms[i][0]

    def residueName(self, i):
        return self.atoms[i][1]

    def residueNumber(self, i):
        return self.atoms[i][2]

    def chainLabel(self, i):
        return self.atoms[i][3]

    def radius(self, i):
        return 1.87


class _FakeResult:
    def __init__(self, structure):
        self._structure = structure

    def totalArea(self):
        return self._structure.total

    def nAtoms(self):
        return self._structure.nAtoms()

    def atomArea(self, i):
        return self._structure.total / self._structure.nAtoms()

    def residueAreas(self):
        s = self._structure
        residue = types.SimpleNamespace(
            residueType="ALA",
            residueNumber="1",
            total=s.total,
            apolar=s.apolar,
            polar=s.polar,
            mainChain=s.total,
            sideChain=0.0,
            hasRelativeAreas=True,
            relativeTotal=s.total / 100.0,
        )
        return {"A": {"1": residue}}


class _FakeParameters:
    def __init__(self, param=None):
        self.param = param or {}
        if self.param.get("n-threads", 1) > 1:
            raise AssertionError("L&R does not support more than 1 threads")


def _make_fake_module(log):
    module = types.ModuleType("freesasa")
    module.normal = 0
    module.nowarnings = 1
    module.silent = 2
    module.Parameters = _FakeParameters

    class Structure(_FakeStructure):
        def __init__(self, *args, **kwargs):
            super().__init__(*args, **kwargs)
            log.append(("parse", self.fileName))

    def calc(structure, parameters=None):
        log.append(("calc", structure.fileName))
        log.append(("parameters", parameters))
        if structure.fail_calc:
            raise Exception("Error calculating SASA.")
        return _FakeResult(structure)

    def classifyResults(result, structure, classifier=None):
        return {"Apolar": structure.apolar, "Polar": structure.polar}

    def selectArea(commands, structure, result):
        areas = {}
        for command in commands:
            name, _, expression = command.partition(",")
            expression = expression.strip()
            if not expression.startswith(("resn", "resi", "chain", "name")):
                raise Exception(f"Error parsing '{command}'")
            areas[name] = result.totalArea() if "ala" in expression.lower() else 0.0
        return areas

    def setVerbosity(level):
        log.append(("verbosity", level))

    module.Structure = Structure
    module.calc = calc
    module.classifyResults = classifyResults
    module.selectArea = selectArea
    module.setVerbosity = setVerbosity
    module.calls = log
    return module


@pytest.fixture
def fake_freesasa(monkeypatch):
    """Replace the ``freesasa`` module; ``fake_freesasa.calls`` records library calls."""
    module = _make_fake_module([])
    monkeypatch.setitem(sys.modules, "freesasa", module)
    return module


@pytest.fixture
def structure_file(tmp_path):
    """Factory writing a fake structure file with the given areas."""

    def _write(name, total=5000.0, apolar=3000.0, polar=2000.0, fail_calc=False):
        path = tmp_path / name
        content = f"AREAS {total} {apolar} {polar}\n"
        if fail_calc:
            content += "FAILCALC\n"
        path.write_text(content)
        return path

    return _write
