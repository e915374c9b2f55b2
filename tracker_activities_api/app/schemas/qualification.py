"""
Pydantic models for qualifications and the qualification grid.

A qualification is a single student's score (0 to 100) on a single
activity.  ``QualificationCreate`` validates its four parameters in
the order ``id_subject``, ``num_list``, ``qualification``,
``id_activity``; the first failing rule is reported.
"""

from typing import Any

from pydantic import BaseModel, ValidationInfo, field_validator

from ..core.validation import RequestSchema, int_in_range, positive_int

MIN_QUALIFICATION = 0
MAX_QUALIFICATION = 100


class QualificationCreate(RequestSchema):
    """Parameters for recording a qualification."""

    required_params = ("id_subject", "num_list", "qualification", "id_activity")
    missing_message = (
        "The id_subject, num_list, qualification and id_activity parameters are required"
    )

    id_subject: int
    num_list: int
    qualification: int
    id_activity: int

    @field_validator("id_subject", "num_list", "id_activity", mode="before")
    @classmethod
    def check_identifiers(cls, v: Any, info: ValidationInfo) -> int:
        return positive_int(v, info.field_name)

    @field_validator("qualification", mode="before")
    @classmethod
    def check_qualification(cls, v: Any) -> int:
        return int_in_range(v, "qualification", MIN_QUALIFICATION, MAX_QUALIFICATION)


class QualificationFilter(RequestSchema):
    """Query parameters of the qualification list."""

    required_params = ("id_activity",)
    missing_message = "The id_activity parameter is required"

    id_activity: int

    @field_validator("id_activity", mode="before")
    @classmethod
    def check_activity_id(cls, v: Any) -> int:
        return positive_int(v, "id_activity")


class GridFilter(RequestSchema):
    """Query parameters of the qualification grid."""

    required_params = ("id_subject",)
    missing_message = "The id_subject parameter is required"

    id_subject: int

    @field_validator("id_subject", mode="before")
    @classmethod
    def check_subject_id(cls, v: Any) -> int:
        return positive_int(v, "id_subject")


class QualificationRead(BaseModel):
    """A qualification row of the list endpoint with related names."""

    id: int
    qualification: int
    num_list_student: int
    student_name: str
    activity_name: str
    subject_name: str


class QualificationCreated(BaseModel):
    id: int
    qualification: int
    num_list_student: int
    id_activity: int
