"""
Pydantic models for company data.

Request bodies carry a single ``name`` field.  It is declared optional
here so that a missing or empty name reaches the endpoint, which
answers with a 400 ``{"error": "Name is required"}`` rather than a
generic validation error.

``CompanyRead`` only insists on ``id`` and ``name`` and accepts extra
fields: records in the data file may lack timestamps or
carry keys beyond the four known ones, and the endpoints return them
as stored (``response_model_exclude_unset``).
"""

from typing import Optional

from pydantic import BaseModel, Field


class CompanyCreate(BaseModel):
    """Schema for creating a company."""

    name: Optional[str] = Field(None, examples=["Acme"])


class CompanyUpdate(BaseModel):
    """Schema for renaming a company."""

    name: Optional[str] = Field(None, examples=["Acme Corp"])


class CompanyRead(BaseModel):
    """Schema for reading a company from the API."""

    id: str
    name: str
    created_at: Optional[str] = Field(None, alias="createdAt", examples=["2025-01-01T12:00:00.000Z"])
    updated_at: Optional[str] = Field(None, alias="updatedAt", examples=["2025-01-01T12:00:00.000Z"])

    model_config = {
        "extra": "allow",
        "populate_by_name": True,
    }


class ErrorResponse(BaseModel):
    """Body of every 4xx/5xx response."""

    error: str
