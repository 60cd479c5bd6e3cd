"""Per-file SASA driver.

Each path is processed on its own: open, parse, compute, classify,
release. Nothing is shared between paths, and the first failure stops the
run, so callers never see results for paths after a bad one.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple, Union

from sasacalc.config.schema import SasaConfig
from sasacalc.sasa.area import ClassifiedArea
from sasacalc.sasa.handles import StructureHandle

logger = logging.getLogger(__name__)


def compute_area(
    path: Union[str, Path],
    config: Optional[SasaConfig] = None,
) -> ClassifiedArea:
    """Compute the classified SASA of one structure file.

    Parameters
    ----------
    path : str or Path
        PDB file to process.
    config : SasaConfig, optional
        Structure options and calculation parameters. Library defaults if None.

    Returns
    -------
    ClassifiedArea
        Total, apolar and polar SASA in Å².

    Raises
    ------
    StructureOpenError, StructureParseError, CalculationError
        On the corresponding failure. Handles acquired before the failure
        are released before the error propagates.
    """
    if config is None:
        config = SasaConfig()

    logger.info(f"Computing SASA for {path}")
    with StructureHandle.from_path(path, config.structure) as structure:
        with structure.compute(config.parameters) as result:
            area = result.classify()

    logger.debug(f"{path}: total={area.total} apolar={area.apolar} polar={area.polar}")
    return area


def iter_areas(
    paths: Iterable[Union[str, Path]],
    config: Optional[SasaConfig] = None,
) -> Iterator[Tuple[str, ClassifiedArea]]:
    """Yield ``(path, area)`` for each path, in order.

    Paths are processed lazily, one at a time, so a consumer can report each
    result before the next file is read. The first error propagates out of
    the generator and no later path is touched.
    """
    if config is None:
        config = SasaConfig()

    for path in paths:
        yield str(path), compute_area(path, config)
