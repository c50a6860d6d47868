"""
Domain models for the customer demo data service.

`Customer` is a plain mutable record: every field starts unset and accepts any
value on assignment. The data service copies customers at every boundary, so
callers never hold a reference to a stored instance.
"""
from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class Customer(BaseModel):
    """
    A customer shown in the demo UI.
    """

    id: Optional[int] = Field(None, description="Identifier assigned on first save.")
    first_name: Optional[str] = Field(None, description="Given name.")
    last_name: Optional[str] = Field(None, description="Family name.")
    email: Optional[str] = Field(None, description="Contact e-mail address.")
    phone: Optional[str] = Field(None, description="Contact phone number.")
    birth_date: Optional[date] = Field(None, description="Date of birth.")

    model_config = {
        "frozen": False,
        "validate_assignment": False,
        "populate_by_name": True,
    }

    def duplicate(self) -> "Customer":
        """Return an independent copy with identical field values."""
        return self.model_copy(deep=True)

    def search_text(self) -> str:
        """
        Concatenate all field values for substring filtering.

        Unset fields render as empty strings. A `date` birth date uses ISO
        format; any other assigned value falls back to `str()`.
        """
        birth_date = self.birth_date
        if isinstance(birth_date, date):
            birth_date = birth_date.isoformat()
        values = (
            self.id,
            self.first_name,
            self.last_name,
            self.email,
            self.phone,
            birth_date,
        )
        return " ".join("" if value is None else str(value) for value in values)

    def __str__(self) -> str:
        return self.search_text()


__all__ = ["Customer"]
