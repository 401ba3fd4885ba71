"""Contacts command line.

Thin glue over the catalog: every command loads the catalog, performs one
action and saves the catalog again when it changed.
"""

from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console

from .application.catalog import Catalog
from .application.search import matches_query
from .config import settings
from .domain.entities import Record, new_organization, new_person
from .domain.exceptions import CatalogIndexError, DomainError
from .logging_config import setup_logging
from .logging_utils import log_user_action

console = Console(soft_wrap=True)
error_console = Console(stderr=True, soft_wrap=True)

app = typer.Typer(
    name="contacts",
    help="""Contacts phone book

    Examples:
      contacts add-person       - add a person (prompts for missing fields)
      contacts add-organization - add an organization
      contacts list             - list all records
      contacts info 2           - show every field of record 2
      contacts edit 2 number 123-456
      contacts search smith     - case-insensitive search
    """,
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def main():
    """Main entry point for the contacts tool."""
    app()


def _echo(text: str) -> None:
    """Print record data verbatim; values like '[no data]' are not markup."""
    console.print(text, markup=False, highlight=False)


def _fail(message: str) -> NoReturn:
    error_console.print(message, style="red", markup=False, highlight=False)
    raise typer.Exit(code=1)


def _catalog(ctx: typer.Context) -> Catalog:
    return ctx.obj


def _save(catalog: Catalog) -> None:
    try:
        catalog.save()
    except DomainError as e:
        _fail(str(e))


def _record_at(catalog: Catalog, number: int) -> Record:
    """Resolve a 1-based record number as shown by ``list``."""
    try:
        return catalog.get(number - 1)
    except CatalogIndexError:
        _fail(f"No record number {number}; the phone book has {catalog.size()}.")


@app.callback()
def load_catalog(
    ctx: typer.Context,
    file: Path | None = typer.Option(
        None, "--file", "-f", help="Catalog document (defaults to CATALOG_PATH)"
    ),
    log_level: str | None = typer.Option(
        None, "--log-level", help="Override the configured log level"
    ),
) -> None:
    """Load the catalog before running a command."""
    setup_logging(log_level)

    catalog = Catalog(file or settings.catalog_path, indent=settings.json_indent)
    try:
        catalog.load()
    except DomainError as e:
        _fail(str(e))
    ctx.obj = catalog


@app.command("add-person")
def add_person(
    ctx: typer.Context,
    name: str = typer.Option(..., prompt="Enter the name"),
    surname: str = typer.Option(..., prompt="Enter the surname"),
    birth: str = typer.Option(..., prompt="Enter the birth date"),
    gender: str = typer.Option(..., prompt="Enter the gender (M, F)"),
    number: str = typer.Option(..., prompt="Enter the number"),
) -> None:
    """Add a person record."""
    catalog = _catalog(ctx)
    catalog.append(new_person(name, surname, birth, gender, number))
    _save(catalog)
    log_user_action("add_record", kind="person", size=catalog.size())
    console.print("The record added.")


@app.command("add-organization")
def add_organization(
    ctx: typer.Context,
    name: str = typer.Option(..., prompt="Enter the organization name"),
    address: str = typer.Option(..., prompt="Enter the address"),
    number: str = typer.Option(..., prompt="Enter the number"),
) -> None:
    """Add an organization record."""
    catalog = _catalog(ctx)
    catalog.append(new_organization(name, address, number))
    _save(catalog)
    log_user_action("add_record", kind="organization", size=catalog.size())
    console.print("The record added.")


@app.command("list")
def list_records(ctx: typer.Context) -> None:
    """List all records by number."""
    for number, record in enumerate(_catalog(ctx), start=1):
        _echo(f"{number}. {record.describe()}")


@app.command()
def info(
    ctx: typer.Context,
    number: int = typer.Argument(..., help="Record number as shown by list"),
) -> None:
    """Show every field of a record."""
    _echo(_record_at(_catalog(ctx), number).full_info())


@app.command()
def edit(
    ctx: typer.Context,
    number: int = typer.Argument(..., help="Record number as shown by list"),
    field: str = typer.Argument(..., help="Field to change"),
    value: str = typer.Argument(..., help="New value"),
) -> None:
    """Change one field of a record."""
    catalog = _catalog(ctx)
    record = _record_at(catalog, number)

    if not record.set_field(field, value):
        available = ", ".join(sorted(record.list_fields()))
        _fail(f"Unknown field '{field}'. Select a field ({available}).")

    _save(catalog)
    log_user_action("edit_record", field=field, position=number)
    console.print("Saved")
    _echo(record.full_info())


@app.command()
def remove(
    ctx: typer.Context,
    number: int = typer.Argument(..., help="Record number as shown by list"),
) -> None:
    """Remove a record."""
    catalog = _catalog(ctx)
    _record_at(catalog, number)
    catalog.remove_at(number - 1)
    _save(catalog)
    log_user_action("remove_record", position=number)
    console.print("The record removed!")


@app.command()
def count(ctx: typer.Context) -> None:
    """Show the number of records."""
    console.print(f"The Phone Book has {_catalog(ctx).size()} records.")


@app.command()
def search(
    ctx: typer.Context,
    query: str = typer.Argument(..., help="Text to look for in any field"),
) -> None:
    """Find records containing the query, case-insensitive."""
    found = _catalog(ctx).find_matching(matches_query(query))
    if not found:
        console.print("No matching records.")
        return

    console.print(f"Found {len(found)} results:")
    for index, record in found:
        _echo(f"{index + 1}. {record.describe()}")


if __name__ == "__main__":
    main()
