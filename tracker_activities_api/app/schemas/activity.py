"""
Pydantic models for activity data.

``ActivityCreate`` holds the rules applied to the create-activity
parameters, in the order they are checked: presence, subject id,
date format and calendar validity, then a non-blank name.
``ActivityRead`` and ``ActivityCreated`` are the response rows; their
``date`` is already formatted as ``dd/mm/yyyy``.
"""

from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

from ..core.dates import matches_iso_format, parse_iso_date
from ..core.validation import RequestSchema, positive_int


class ActivityCreate(RequestSchema):
    """Parameters for creating an activity."""

    required_params = (("id", "id_subject"), "name", "date")
    missing_message = "The id (subject), name and date parameters are required"

    id_subject: int = Field(..., validation_alias=AliasChoices("id", "id_subject"), examples=[1])
    date: str = Field(..., examples=["2024-12-01"])
    name: str = Field(..., examples=["Exam"])
    description: Optional[str] = Field(None, examples=["First partial exam"])

    @field_validator("id_subject", mode="before")
    @classmethod
    def check_subject_id(cls, v: Any) -> int:
        return positive_int(v, "id")

    @field_validator("date", mode="before")
    @classmethod
    def check_date(cls, v: Any) -> str:
        if not isinstance(v, str) or not matches_iso_format(v):
            raise PydanticCustomError(
                "date_format", "The date parameter must use the YYYY-MM-DD format"
            )
        if parse_iso_date(v) is None:
            raise PydanticCustomError("date_value", "The date provided is not a valid date")
        return v

    @field_validator("name", mode="before")
    @classmethod
    def check_name(cls, v: Any) -> str:
        if not isinstance(v, str) or not v.strip():
            raise PydanticCustomError("blank_name", "The activity name cannot be empty")
        return v.strip()

    @field_validator("description", mode="before")
    @classmethod
    def clean_description(cls, v: Any) -> Optional[str]:
        if v is None:
            return None
        if not isinstance(v, str):
            raise PydanticCustomError(
                "description_type", "The description parameter must be text"
            )
        return v.strip() or None


class ActivityFilter(RequestSchema):
    """Query parameters of the activity list."""

    required_params = ("id_subject",)
    missing_message = "The id_subject parameter is required"

    id_subject: int

    @field_validator("id_subject", mode="before")
    @classmethod
    def check_subject_id(cls, v: Any) -> int:
        return positive_int(v, "id_subject")


class ActivityRead(BaseModel):
    """An activity row of the list endpoint, joined with its subject name."""

    id: int
    name: str
    date: Optional[str]
    description: Optional[str] = None
    subject_name: str


class ActivityCreated(BaseModel):
    """The stored activity echoed back by the create endpoint."""

    id: int
    name: str
    date: Optional[str]
    id_subject: int
    description: Optional[str] = None
