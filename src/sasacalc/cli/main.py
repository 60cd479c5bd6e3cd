"""
sasacalc Command Line Interface.

Prints the total, non-polar and polar solvent-accessible surface area of
each structure file given on the command line, using FreeSASA's default
classifier and calculation parameters.

Usage:
    sasacalc --help
    sasacalc 1ubq.pdb
    sasacalc 1ubq.pdb 2lzm.pdb 5xh3.pdb
"""

from __future__ import annotations

import logging
import sys
from typing import Tuple

import click

from sasacalc import __version__

LOGGER = logging.getLogger("sasacalc")


@click.command()
@click.version_option(version=__version__, prog_name="sasacalc")
@click.argument("paths", nargs=-1, type=click.Path(dir_okay=True))
@click.option(
    "-q", "--quiet", is_flag=True, help="Show errors only, silence FreeSASA warnings"
)
@click.option("--debug", is_flag=True, help="Enable DEBUG logging and tracebacks")
def cli(paths: Tuple[str, ...], quiet: bool, debug: bool) -> None:
    """Compute polar/non-polar SASA for each PDB file in PATHS.

    Files are processed in the order given. The first file that cannot be
    opened, parsed or computed stops the run with exit status 1.

    \b
    Example:
        sasacalc 1ubq.pdb 2lzm.pdb
    """
    from sasacalc.core.errors import SasaError
    from sasacalc.core.logging_utils import setup_logging
    from sasacalc.sasa import format_area_block, iter_areas

    setup_logging(quiet=quiet, debug=debug)
    LOGGER.debug(f"Processing {len(paths)} structure(s)")

    try:
        for path, area in iter_areas(paths):
            click.echo(format_area_block(path, area), nl=False)
    except SasaError as e:
        LOGGER.error(f"Error: {e}")
        if debug:
            import traceback

            traceback.print_exc()
        sys.exit(1)


def main() -> int:
    """Main entry point."""
    try:
        cli()
        return 0
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
