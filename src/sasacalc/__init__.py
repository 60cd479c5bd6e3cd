"""
sasacalc: polar/non-polar solvent-accessible surface area of PDB structures.

A thin front end over the FreeSASA library. Structure parsing, the
Lee-Richards / Shrake-Rupley geometry and atom classification all happen
inside FreeSASA; this package scopes its handles, classifies the result and
reports it.

Example usage:
    >>> from sasacalc import compute_area
    >>> area = compute_area("1ubq.pdb")
    >>> area.total, area.apolar, area.polar

    $ sasacalc 1ubq.pdb 2lzm.pdb

Note:
    FreeSASA is imported lazily, so ``sasacalc.config`` can be used without
    the compiled extension installed.
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "SasaConfig",
    "ClassifiedArea",
    "compute_area",
    "iter_areas",
]


def __getattr__(name: str):
    """Lazy import modules that need FreeSASA only when accessed."""
    if name == "SasaConfig":
        from sasacalc.config.schema import SasaConfig

        return SasaConfig

    if name == "ClassifiedArea":
        from sasacalc.sasa.area import ClassifiedArea

        return ClassifiedArea

    if name == "compute_area":
        from sasacalc.sasa.driver import compute_area

        return compute_area

    if name == "iter_areas":
        from sasacalc.sasa.driver import iter_areas

        return iter_areas

    raise AttributeError(f"module 'sasacalc' has no attribute {name!r}")


def __dir__():
    """Return list of available attributes for tab completion."""
    return __all__
