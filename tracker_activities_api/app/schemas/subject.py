"""Pydantic models for subject data."""

from pydantic import BaseModel, Field


class SubjectRead(BaseModel):
    """A subject as returned by the list endpoint."""

    id: int
    subject: str = Field(..., examples=["Math"])
