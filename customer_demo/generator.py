"""
Deterministic seed dataset for the customer demo data service.

Customers are built by randomly combining fixed first and last name lists with a
private `random.Random` instance, so the same seed always produces the same
records regardless of global random state.
"""

from __future__ import annotations

import random
from datetime import date, timedelta
from typing import List

from customer_demo.domain.models import Customer

DEFAULT_CUSTOMER_COUNT = 100
DEFAULT_SEED = 0

FIRST_NAMES = [
    "Peter",
    "Alice",
    "John",
    "Mike",
    "Olivia",
    "Nina",
    "Alex",
    "Rita",
    "Dan",
    "Umberto",
    "Henrik",
    "Rene",
    "Lisa",
    "Linda",
    "Timothy",
    "Daniel",
    "Brian",
    "George",
    "Scott",
    "Jennifer",
]
LAST_NAMES = [
    "Smith",
    "Johnson",
    "Williams",
    "Jones",
    "Brown",
    "Davis",
    "Miller",
    "Wilson",
    "Moore",
    "Taylor",
    "Anderson",
    "Thomas",
    "Jackson",
    "White",
    "Harris",
    "Martin",
    "Thompson",
    "Young",
    "King",
    "Robinson",
]

PHONE_PREFIX = "+ 358 555 "
BIRTH_YEAR_START = 1930
BIRTH_YEAR_SPAN = 70


def _birth_date(year: int, month_index: int, day_offset: int) -> date:
    """
    Resolve a birth date leniently.

    `month_index` is zero-based and `day_offset` counts from the day before the
    first of the month, so an offset of 0 lands on the previous month's last day.
    """
    return date(year, month_index + 1, 1) + timedelta(days=day_offset - 1)


def _generate_customer(rng: random.Random) -> Customer:
    first_name = FIRST_NAMES[rng.randrange(len(FIRST_NAMES))]
    last_name = LAST_NAMES[rng.randrange(len(LAST_NAMES))]
    phone = f"{PHONE_PREFIX}{100 + rng.randrange(900)}"
    birth_date = _birth_date(
        BIRTH_YEAR_START + rng.randrange(BIRTH_YEAR_SPAN),
        rng.randrange(11),
        rng.randrange(28),
    )
    return Customer(
        first_name=first_name,
        last_name=last_name,
        email=f"{first_name.lower()}@{last_name.lower()}.com",
        phone=phone,
        birth_date=birth_date,
    )


def generate_customers(
    count: int = DEFAULT_CUSTOMER_COUNT, seed: int = DEFAULT_SEED
) -> List[Customer]:
    """
    Generate `count` customers without identifiers.

    Parameters
    ----------
    count : int
        Number of customers to build.
    seed : int
        Seed for the private RNG; equal seeds yield equal datasets.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    rng = random.Random(seed)
    return [_generate_customer(rng) for _ in range(count)]


__all__ = [
    "DEFAULT_CUSTOMER_COUNT",
    "DEFAULT_SEED",
    "FIRST_NAMES",
    "LAST_NAMES",
    "generate_customers",
]
