"""
Pydantic schemas for payables.

A payable is identified by a client supplied string ``id``.  The
``assignor`` field holds the id of an assignor but is not checked
against the assignor table.
"""

from datetime import date

from pydantic import BaseModel, Field


class PayableBase(BaseModel):
    value: float = Field(..., allow_inf_nan=False, description="Amount of the payable", example=1500.75)
    emission_date: date = Field(..., description="Date the payable was issued", example="2024-01-31")
    assignor: str = Field(..., min_length=1, description="Identifier of the assignor")


class PayableCreate(PayableBase):
    """Schema for creating a payable; the caller chooses the ``id``."""

    id: str = Field(..., min_length=1, example="p1")


class PayableUpdate(PayableBase):
    """Replacement body for ``PUT /integrations/payable/{id}``."""


class PayableRead(PayableCreate):
    """Schema for reading a payable."""

    model_config = {
        "from_attributes": True,
    }
