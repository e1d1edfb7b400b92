"""
ihex - Intel HEX Encoder Command-Line Interface
===============================================

This module implements the command-line interface for the encoder. The
hex fragments given on the command line are concatenated, encoded, and
printed to stdout (or written to a file).

Usage Examples
--------------
Encode a payload with the default 16 bytes per record:
    $ ihex 00112233

Use 2 bytes per record:
    $ ihex -r 2 00112233

Join several fragments and write to a file:
    $ ihex -o payload.hex DEAD BEEF CAFE

Convert to binary with objcopy:
    $ ihex -o payload.hex DEADBEEF
    $ objcopy -I ihex -O binary payload.hex payload.bin
"""

import logging
from pathlib import Path
from typing import Optional

import click

from ihexgen import __version__
from ihexgen.cli.errors import handle_cli_exception
from ihexgen.errors import IHexError
from ihexgen.ihex import (
    DEFAULT_RECORD_LENGTH,
    MAX_RECORD_LENGTH,
    encode_fragments,
    verify_record_checksum,
)

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# Main Command
# =============================================================================

@click.command()
@click.version_option(__version__, "--version", "-V", prog_name="ihex")
@click.argument("hex_strings", nargs=-1, required=True)
@click.option(
    "-r", "--record-length",
    type=click.IntRange(1, MAX_RECORD_LENGTH),
    default=DEFAULT_RECORD_LENGTH,
    show_default=True,
    help="Data bytes per record",
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Output file (default: stdout)",
)
@click.option(
    "--verify",
    is_flag=True,
    help="Re-check the checksum of every produced record",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
def main(
    hex_strings: tuple[str, ...],
    record_length: int,
    output: Optional[Path],
    verify: bool,
    verbose: bool,
) -> None:
    """
    Encode hex digits as Intel HEX.

    HEX_STRINGS are one or more strings of hex digits [0-9a-fA-F]. They are
    concatenated before encoding, so a byte may be split across arguments.

    \b
    Examples:
      ihex 00112233
      ihex -r 2 00112233
      ihex -o payload.hex DEAD BEEF
    """
    setup_logging(verbose)

    try:
        text = encode_fragments(hex_strings, record_length=record_length)

        if verify:
            lines = text.splitlines()
            bad = [line for line in lines if not verify_record_checksum(line)]
            if bad:
                raise IHexError(
                    f"{len(bad)} of {len(lines)} records failed checksum verification"
                )
            logger.info(f"Verified {len(lines)} records")

        if output is None:
            click.echo(text, nl=False)
        else:
            output.write_text(text)
            if verbose:
                click.echo(f"Wrote {output} ({len(text.splitlines())} records)", err=True)

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    main()
