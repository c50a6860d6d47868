"""
Utilities package for the customer demo data service.

Exports shared logging helpers. Keep this package lightweight and free of
domain-specific logic.
"""

from customer_demo.utils.logging import JsonFormatter, configure_logging, get_logger

__all__ = [
    "JsonFormatter",
    "configure_logging",
    "get_logger",
]
