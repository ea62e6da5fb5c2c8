"""Command-line interface for petcheckin."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from petcheckin.config import Config
from petcheckin.inputs import StreamInput
from petcheckin.models import CheckInRecord
from petcheckin.prompts import run_checkin


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """petcheckin: pet boarding check-in at the front desk."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _load_config(path: str | None) -> Config:
    root = Path(path).resolve() if path else None
    return Config.load(root) if root else Config.load_from_cwd()


def _echo_record(record: CheckInRecord, as_json: bool) -> None:
    if as_json:
        click.echo(json.dumps(record.to_dict(), indent=2))
        return

    view = record.to_receipt()
    click.echo(f"\n{'='*40}")
    click.echo(f"Pet:         {view['pet_name']} ({view['pet_type'] or 'unknown'})")
    click.echo(f"Age:         {view['pet_age']}")
    click.echo(f"Days:        {view['days_stay']}")
    click.echo(f"Amount due:  ${view['amount_due']:.2f}")


# --------------------------------------------------------------------------- #
# init
# --------------------------------------------------------------------------- #

@main.command()
@click.option("--path", default=".", help="Facility directory")
def init(path: str):
    """Write .petcheckin/config.toml with the default facility settings."""
    config_file, written = Config.write_default(Path(path).resolve())
    if written:
        click.echo(f"Wrote {config_file}")
    else:
        click.echo(f"Config already exists: {config_file}")


# --------------------------------------------------------------------------- #
# checkin
# --------------------------------------------------------------------------- #

@main.command()
@click.option("--days", type=int, default=None, help="Length of stay (default: config)")
@click.option("--amount-due", type=float, default=None, help="Amount due (default: config)")
@click.option(
    "--script",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read answers from a file instead of standard input",
)
@click.option("--json", "as_json", is_flag=True, help="Print the full record as JSON")
@click.option("--path", default=None, help="Facility directory (default: auto-detect)")
def checkin(
    days: int | None,
    amount_due: float | None,
    script: Path | None,
    as_json: bool,
    path: str | None,
):
    """Check a pet in by answering the type, name and age prompts."""
    config = _load_config(path)
    record = config.blank_record(days_stay=days, amount_due=amount_due)

    with StreamInput(script) as source:
        try:
            run_checkin(record, source)
        except (ValueError, EOFError) as exc:
            raise click.ClickException(str(exc)) from exc

    _echo_record(record, as_json)


# --------------------------------------------------------------------------- #
# receipt
# --------------------------------------------------------------------------- #

@main.command()
@click.argument("pet_type")
@click.argument("pet_name")
@click.argument("pet_age", type=int)
@click.option("--days", type=int, default=None, help="Length of stay (default: config)")
@click.option("--amount-due", type=float, default=None, help="Amount due (default: config)")
@click.option("--json", "as_json", is_flag=True, help="Print the full record as JSON")
@click.option("--path", default=None, help="Facility directory (default: auto-detect)")
def receipt(
    pet_type: str,
    pet_name: str,
    pet_age: int,
    days: int | None,
    amount_due: float | None,
    as_json: bool,
    path: str | None,
):
    """Build a record from the command line, without prompting, and print it."""
    config = _load_config(path)
    record = CheckInRecord(
        pet_type=pet_type,
        pet_name=pet_name,
        pet_age=pet_age,
        dog_spaces=config.dog_spaces,
        cat_spaces=config.cat_spaces,
        days_stay=config.days_stay if days is None else days,
        amount_due=config.amount_due if amount_due is None else amount_due,
    )
    _echo_record(record, as_json)
