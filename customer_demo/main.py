from __future__ import annotations

import json
import sys
from datetime import date
from typing import Optional

import typer

from customer_demo.config import get_settings
from customer_demo.domain.models import Customer
from customer_demo.generator import DEFAULT_CUSTOMER_COUNT, DEFAULT_SEED
from customer_demo.service import PaginationError, create_demo_service
from customer_demo.utils.logging import configure_logging

app = typer.Typer(help="Customer demo data service CLI.")


def _format_row(customer: Customer) -> str:
    birth_date = customer.birth_date
    if isinstance(birth_date, date):
        birth_date = birth_date.isoformat()
    return (
        f"{customer.id:>4}  {customer.first_name or ''} {customer.last_name or ''}  "
        f"{customer.email or ''}  {customer.phone or ''}  {birth_date or ''}"
    )


@app.callback()
def _setup() -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | log_level={settings.log_level} | "
        f"customers={DEFAULT_CUSTOMER_COUNT} seed={DEFAULT_SEED}"
    )


@app.command()
def count() -> None:
    """
    Print the number of customers in the demo service.
    """
    typer.echo(str(create_demo_service().count()))


@app.command("list")
def list_customers(
    string_filter: Optional[str] = typer.Option(
        None,
        "--filter",
        "-f",
        help="Case-insensitive text that listed customers must contain.",
    ),
    start: Optional[int] = typer.Option(
        None,
        "--start",
        help="Index of the first customer to show (requires --max).",
    ),
    max_results: Optional[int] = typer.Option(
        None,
        "--max",
        "-n",
        help="Maximum number of customers to show (requires --start).",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Emit customers as a JSON array.",
    ),
) -> None:
    """
    List demo customers, newest identifier first.
    """
    if (start is None) != (max_results is None):
        typer.echo("--start and --max must be used together.", err=True)
        raise typer.Exit(code=2)

    service = create_demo_service()
    try:
        customers = service.find_all(string_filter, start, max_results)
    except PaginationError as exc:
        typer.echo(f"Invalid page: {exc}", err=True)
        raise typer.Exit(code=2) from exc

    if as_json:
        typer.echo(json.dumps([c.model_dump(mode="json") for c in customers], indent=2))
        return
    for customer in customers:
        typer.echo(_format_row(customer))


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
