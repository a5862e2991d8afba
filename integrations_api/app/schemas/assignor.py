"""
Pydantic schemas for assignors.

Field length limits mirror the columns used by the integrations
partners: document up to 30 characters, e‑mail and name up to 140 and
phone up to 20.
"""

from pydantic import BaseModel, Field


class AssignorBase(BaseModel):
    document: str = Field(..., min_length=1, max_length=30, example="12345678000199")
    email: str = Field(..., min_length=1, max_length=140, example="billing@example.com")
    phone: str = Field(..., min_length=1, max_length=20, example="+55 11 99999-0000")
    name: str = Field(..., min_length=1, max_length=140, example="ACME Ltda")


class AssignorCreate(AssignorBase):
    """Schema for creating an assignor; the caller chooses the ``id``."""

    id: str = Field(..., min_length=1, example="a1")


class AssignorUpdate(AssignorBase):
    """Replacement body for ``PUT /integrations/assignor/{id}``."""


class AssignorRead(AssignorCreate):
    """Schema for reading an assignor."""

    model_config = {
        "from_attributes": True,
    }
