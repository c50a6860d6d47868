"""
In-memory customer data service backing the demo UI.

`CustomerDataService` keeps customers in a dict keyed by identifier and copies
them on every read and write, so callers only ever hold independent instances.
All public methods are serialised by a per-instance lock.

Host applications should construct a service and pass it where it is needed.
`create_demo_service()` exists for code that wants the shared, pre-seeded
instance:

    from customer_demo.service import create_demo_service

    service = create_demo_service()
    page = service.find_all("smith", start=0, max_results=10)
"""

from __future__ import annotations

import threading
from typing import Dict, Iterable, List, Optional

from customer_demo.domain.models import Customer
from customer_demo.generator import DEFAULT_CUSTOMER_COUNT, DEFAULT_SEED, generate_customers
from customer_demo.utils.logging import get_logger

log = get_logger(__name__)


class PaginationError(IndexError):
    """Raised when a page request falls outside the filtered result set."""


class CustomerDataService:
    """
    Thread-safe in-memory store of customers.

    Identifiers are assigned from a counter starting at 0 and are never reused,
    even after deletion.
    """

    def __init__(self) -> None:
        self._customers: Dict[int, Customer] = {}
        self._next_id = 0
        self._lock = threading.Lock()

    def find_all(
        self,
        string_filter: Optional[str] = None,
        start: Optional[int] = None,
        max_results: Optional[int] = None,
    ) -> List[Customer]:
        """
        Return copies of the customers matching `string_filter`, newest id first.

        Parameters
        ----------
        string_filter : str, optional
            Case-insensitive substring matched against each customer's search
            text. None or an empty string matches every customer.
        start : int, optional
            Index of the first result to return. Must be given together with
            `max_results`.
        max_results : int, optional
            Maximum number of results to return.

        Raises
        ------
        PaginationError
            If `start` is negative or past the end of the filtered results, or
            `max_results` is negative.
        """
        if (start is None) != (max_results is None):
            raise TypeError("start and max_results must be given together")

        with self._lock:
            matches = self._filtered(string_filter)

        if start is None:
            return matches

        size = len(matches)
        if start < 0 or start > size:
            raise PaginationError(f"start index {start} out of range for {size} results")
        if max_results < 0:
            raise PaginationError(f"max_results must be non-negative, got {max_results}")
        return matches[start : min(start + max_results, size)]

    def count(self) -> int:
        """Return the number of stored customers, ignoring any filter."""
        with self._lock:
            return len(self._customers)

    def delete(self, customer: Customer) -> None:
        """Remove the stored customer with `customer.id`; unknown ids are ignored."""
        with self._lock:
            removed = self._customers.pop(customer.id, None)
        if removed is not None:
            log.debug("deleted customer", extra={"customer_id": customer.id})

    def save(self, customer: Customer) -> Customer:
        """
        Persist or update a customer.

        A customer without an identifier receives the next one; the caller's
        object is updated with it. The stored value is a copy, so later changes to
        `customer` do not leak into the store.

        Returns
        -------
        Customer
            A copy of the customer as stored.
        """
        with self._lock:
            stored = customer.duplicate()
            created = stored.id is None
            if created:
                stored.id = self._next_id
                self._next_id += 1
                customer.id = stored.id
            self._customers[stored.id] = stored
            result = stored.duplicate()
        log.debug(
            "saved customer",
            extra={"customer_id": result.id, "new_customer": created},
        )
        return result

    def seed(self, customers: Iterable[Customer]) -> int:
        """Save every customer in order and return how many were saved."""
        saved = 0
        for customer in customers:
            self.save(customer)
            saved += 1
        return saved

    def _filtered(self, string_filter: Optional[str]) -> List[Customer]:
        # Caller must hold self._lock.
        needle = string_filter.lower() if string_filter else None
        matches = [
            customer.duplicate()
            for customer in self._customers.values()
            if needle is None or needle in customer.search_text().lower()
        ]
        matches.sort(key=lambda customer: customer.id, reverse=True)
        return matches


_demo_service: Optional[CustomerDataService] = None
_demo_lock = threading.Lock()


def create_demo_service() -> CustomerDataService:
    """
    Return the process-wide demo service, building and seeding it on first use.

    The dataset is always 100 customers generated from seed 0, identical in
    every process regardless of environment.
    """
    global _demo_service
    with _demo_lock:
        if _demo_service is None:
            service = CustomerDataService()
            saved = service.seed(
                generate_customers(count=DEFAULT_CUSTOMER_COUNT, seed=DEFAULT_SEED)
            )
            log.info(
                "seeded demo customer service",
                extra={"customers": saved, "seed": DEFAULT_SEED},
            )
            _demo_service = service
        return _demo_service


__all__ = ["CustomerDataService", "PaginationError", "create_demo_service"]
