"""
Domain package for the customer demo data service.

Exports the record types stored by the service. Keep this package focused on
data definitions.
"""

from customer_demo.domain.models import Customer

__all__ = [
    "Customer",
]
