"""
Pytest configuration for the customer demo data service.

Provides fixtures for:
- Empty and seeded service instances
- Resetting the shared demo service and cached settings
- Restoring root logging configuration
"""

from __future__ import annotations

import logging
from typing import Generator

import pytest

from customer_demo import service as service_module
from customer_demo.config import get_settings
from customer_demo.domain.models import Customer
from customer_demo.generator import generate_customers
from customer_demo.service import CustomerDataService

SEEDED_CUSTOMERS = 100


@pytest.fixture
def service() -> CustomerDataService:
    """
    An empty data service.
    """
    return CustomerDataService()


@pytest.fixture
def seeded_service() -> CustomerDataService:
    """
    A data service holding the default 100-customer dataset (ids 0-99).
    """
    svc = CustomerDataService()
    svc.seed(generate_customers(count=SEEDED_CUSTOMERS, seed=0))
    return svc


@pytest.fixture
def make_customer():
    """
    Factory for unsaved customers with sensible defaults.
    """

    def _make(**fields) -> Customer:
        defaults = {
            "first_name": "Ada",
            "last_name": "Lovelace",
            "email": "ada@lovelace.com",
            "phone": "+ 358 555 123",
        }
        defaults.update(fields)
        return Customer(**defaults)

    return _make


@pytest.fixture
def fresh_demo_service(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """
    Drop the cached demo service and settings so each test builds its own.
    """
    monkeypatch.setattr(service_module, "_demo_service", None)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def restore_root_logging() -> Generator[logging.Logger, None, None]:
    """
    Restore root logger handlers and level after a test reconfigures logging.
    """
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
