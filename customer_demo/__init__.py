"""
Customer Demo - in-memory mock data service for seeding a demo UI.

This package provides:

- A mutable `Customer` record type
- A deterministic generator for the 100-customer seed dataset
- A thread-safe in-memory data service with filtering, sorting and pagination
- A shared, lazily seeded demo service instance

Data lives only in process memory and is regenerated on first access in every
process.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from customer_demo.config import Settings, get_settings
from customer_demo.domain.models import Customer
from customer_demo.generator import generate_customers
from customer_demo.service import CustomerDataService, PaginationError, create_demo_service
from customer_demo.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Customer",
    "generate_customers",
    # Service
    "CustomerDataService",
    "PaginationError",
    "create_demo_service",
    # Logging
    "configure_logging",
    "get_logger",
]
