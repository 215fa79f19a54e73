"""
Registrar CLI - offline helpers for the name auction.

Validates names, prints name hashes and builds sealed bids without
touching the network, so a commitment can be prepared on an offline
machine and submitted later.
"""

import json
import logging
from pathlib import Path

import click

from ens_registrar import __version__
from ens_registrar.utils.logger import setup_logging


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--min-length", default=None, type=int, help="Minimum name length (default: 7)")
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx, debug, min_length):
    """Sealed-bid name auction registrar tools"""
    from ens_registrar.core.config import DEFAULT_MIN_NAME_LENGTH

    level = logging.DEBUG if debug else logging.WARNING
    setup_logging(level=level)

    ctx.ensure_object(dict)
    ctx.obj["min_length"] = min_length if min_length is not None else DEFAULT_MIN_NAME_LENGTH


# =============================================================================
# Name Commands
# =============================================================================


@cli.command("validate")
@click.argument("name")
@click.pass_context
def validate(ctx, name):
    """Check whether NAME can enter the auction"""
    from ens_registrar.core.names import check_name, normalize_name

    valid, err = check_name(name, ctx.obj["min_length"])
    if not valid:
        click.echo(f"✗ {err}")
        ctx.exit(1)

    click.echo(f"✓ {normalize_name(name)}")


@cli.command("namehash")
@click.argument("name")
@click.pass_context
def namehash(ctx, name):
    """Print the canonical form of NAME and its registry hash"""
    from ens_registrar.core.exceptions import InvalidName
    from ens_registrar.core.hashing import name_hash
    from ens_registrar.core.names import prepare_name
    from ens_registrar.crypto import bytes_to_hex

    try:
        normalized = prepare_name(name, ctx.obj["min_length"])
    except InvalidName as e:
        raise click.ClickException(str(e))

    click.echo(f"Name: {normalized}")
    click.echo(f"Hash: {bytes_to_hex(name_hash(normalized))}")


# =============================================================================
# Bid Commands
# =============================================================================


@cli.command("bid")
@click.argument("name")
@click.option("--owner", required=True, help="Deed owner address (0x...)")
@click.option("--value", required=True, type=int, help="Bid value in wei")
@click.option("--secret", prompt=True, hide_input=True, help="Bid secret (needed again to reveal)")
@click.option("--deposit", default=None, type=int, help="Deposit in wei (default: value)")
@click.option("--output", "output", default=None, type=click.Path(dir_okay=False), help="Save bid JSON to file")
@click.pass_context
def bid(ctx, name, owner, value, secret, deposit, output):
    """Build a sealed bid for NAME offline"""
    from ens_registrar.core.bid import make_bid
    from ens_registrar.core.exceptions import RegistrarError

    if deposit is None:
        deposit = value

    try:
        sealed = make_bid(name, owner, value, secret, deposit, min_length=ctx.obj["min_length"])
    except RegistrarError as e:
        raise click.ClickException(str(e))

    data = json.dumps(sealed.to_dict(), indent=2)

    if output:
        path = Path(output)
        path.write_text(data)
        click.echo(f"✓ Bid saved to {path}")
        click.echo(f"  Commitment: {sealed.sha_bid}")
        click.echo(f"  ⚠️  The file contains your secret - keep it until the reveal!")
    else:
        click.echo(data)

    if sealed.is_underfunded:
        click.echo(f"⚠️  Deposit {deposit} is below value {value}; the reveal will fail", err=True)


if __name__ == "__main__":
    cli()
