#!/usr/bin/env python3
"""sharevote command line.

Usage:
    sharevote solve [FILE ...] [--mode fingerprint|rational|field] [--remote URL]
    sharevote decode BASE DIGITS
    sharevote encode VALUE BASE

``solve`` prints, per file, the plurality secret followed by the shares
that disagree with it.  With ``--remote`` the share file is sent to a
running reconstruction service instead of being solved locally.
"""

from __future__ import annotations

import logging
import sys
from typing import List, Tuple

import click

from sharevote.arith import radix
from sharevote.arith.bigint import BigInt
from sharevote.config import DEFAULT_INPUTS, DEFAULT_MODE, LOG_LEVEL, MODES
from sharevote.consensus.solver import reconstruct
from sharevote.errors import ReconstructionError
from sharevote.io.share_file import from_document, read_document, read_text
from sharevote.service.client import ReconstructionClient
from sharevote.shares import decode_share

logger = logging.getLogger(__name__)


def _solve_local(path: str, mode: str) -> Tuple[str, List[int]]:
    parsed = from_document(read_document(read_text(path)))
    result = reconstruct(parsed.to_points(), parsed.k, mode)
    logger.debug(
        "%s: %d subsets, winner has %d votes", path, result.subsets, result.votes
    )
    return str(result.secret), sorted(result.suspects)


def _solve_remote(client: ReconstructionClient, path: str, mode: str) -> Tuple[str, List[int]]:
    body = client.reconstruct(read_document(read_text(path)), mode)
    return body["secret"], body["suspects"]


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log at DEBUG level")
def cli(verbose: bool) -> None:
    """Reconstruct Shamir secrets and flag inconsistent shares."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("files", nargs=-1, type=click.Path(dir_okay=False))
@click.option(
    "--mode",
    type=click.Choice(MODES),
    default=DEFAULT_MODE,
    show_default=True,
    help="Interpolation mode",
)
@click.option("--remote", metavar="URL", default=None, help="Solve via a reconstruction service")
def solve(files: Tuple[str, ...], mode: str, remote: str | None) -> None:
    """Solve each share FILE (default: testcase1.json testcase2.json)."""
    paths = list(files) or DEFAULT_INPUTS
    client = ReconstructionClient(remote) if remote else None
    failed = False
    try:
        for path in paths:
            try:
                if client is not None:
                    secret, suspects = _solve_remote(client, path, mode)
                else:
                    secret, suspects = _solve_local(path, mode)
            except ReconstructionError as exc:
                failed = True
                click.echo(f"Error in {path}: [{exc.kind}] {exc}", err=True)
                continue
            click.echo(f"Secret from {path}: {secret}")
            click.echo("Likely faulty shares (if any):")
            for x in suspects:
                click.echo(f"Share ({x}) may be faulty.")
    finally:
        if client is not None:
            client.close()
    if failed:
        sys.exit(1)


@cli.command()
@click.argument("base", type=int)
@click.argument("digits")
def decode(base: int, digits: str) -> None:
    """Print DIGITS (in BASE) as a decimal integer."""
    try:
        click.echo(decode_share(base, digits).to_decimal_string())
    except ReconstructionError as exc:
        raise click.ClickException(f"[{exc.kind}] {exc}")


@cli.command()
@click.argument("value")
@click.argument("base", type=int)
def encode(value: str, base: int) -> None:
    """Print the non-negative decimal VALUE in BASE."""
    try:
        click.echo(radix.encode(BigInt.from_decimal_string(value), base))
    except ReconstructionError as exc:
        raise click.ClickException(f"[{exc.kind}] {exc}")
    except ValueError as exc:
        raise click.ClickException(str(exc))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
