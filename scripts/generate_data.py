"""
Seed dataset export script for the customer demo data service.

Generates the deterministic demo customers, assigns identifiers by saving them
into a fresh data service, and writes them to CSV for inspection or for loading
into other tools.
"""

from __future__ import annotations

import csv
import sys
import time
from pathlib import Path
from typing import Iterable

import typer

from customer_demo.domain.models import Customer
from customer_demo.generator import DEFAULT_CUSTOMER_COUNT, DEFAULT_SEED, generate_customers
from customer_demo.service import CustomerDataService

app = typer.Typer(help="Generate the demo customer dataset and write it to CSV.")

CSV_HEADER = ["id", "first_name", "last_name", "email", "phone", "birth_date"]


def _write_customers_csv(csv_path: Path, customers: Iterable[Customer]) -> int:
    written = 0
    with csv_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(CSV_HEADER)
        for customer in customers:
            writer.writerow(
                [
                    customer.id,
                    customer.first_name,
                    customer.last_name,
                    customer.email,
                    customer.phone,
                    customer.birth_date.isoformat() if customer.birth_date else "",
                ]
            )
            written += 1
    return written


def _build_dataset(rows: int, seed: int) -> list[Customer]:
    service = CustomerDataService()
    service.seed(generate_customers(count=rows, seed=seed))
    # Ascending id order matches generation order.
    return list(reversed(service.find_all()))


@app.command()
def main(
    rows: int = typer.Option(
        DEFAULT_CUSTOMER_COUNT,
        "--rows",
        "-r",
        min=0,
        help="Number of customers to generate.",
    ),
    seed: int = typer.Option(
        DEFAULT_SEED,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    output: Path = typer.Option(
        Path("customers.csv"),
        "--output",
        "-o",
        help="CSV output path.",
    ),
) -> None:
    """
    Generate demo customers and write them to a CSV file.
    """
    start = time.perf_counter()
    output.parent.mkdir(parents=True, exist_ok=True)

    typer.echo(f"Generating {rows:,} customers -> {output} (seed={seed})")
    written = _write_customers_csv(output, _build_dataset(rows, seed))
    duration = time.perf_counter() - start
    typer.echo(f"Wrote {written:,} customers in {duration:.3f}s")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
