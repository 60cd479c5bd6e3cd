"""Error taxonomy for SASA computation.

Every failure while processing a structure file is fatal to the run. Each
error carries the offending path so the command line can report it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union


class SasaError(Exception):
    """Base class for failures while processing one structure file.

    Attributes
    ----------
    path : str
        The structure path exactly as it was given.
    """

    def __init__(self, path: Union[str, Path], message: str) -> None:
        self.path = str(path)
        super().__init__(message)


class StructureOpenError(SasaError):
    """The path does not name a readable file."""

    def __init__(self, path: Union[str, Path], reason: str = "") -> None:
        message = f"Could not open file {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(path, message)


class StructureParseError(SasaError):
    """FreeSASA could not build a structure from the file contents."""

    def __init__(self, path: Union[str, Path]) -> None:
        super().__init__(path, f"Error reading structure from {path}")


class CalculationError(SasaError):
    """FreeSASA could not compute surface areas for the structure."""

    def __init__(self, path: Union[str, Path]) -> None:
        super().__init__(path, f"Error calculating SASA for {path}")


class HandleReleasedError(RuntimeError):
    """A structure or result handle was used after release."""


class SelectionError(SasaError):
    """FreeSASA rejected a selection expression."""

    def __init__(self, path: Union[str, Path], name: str, expression: str) -> None:
        self.name = name
        self.expression = expression
        super().__init__(path, f"Invalid selection '{name}, {expression}' for {path}")
