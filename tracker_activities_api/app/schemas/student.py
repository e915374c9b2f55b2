"""Pydantic models for student data.

Students are identified by their list number (``num_list``), which is
the key qualifications refer to.
"""

from pydantic import BaseModel, Field


class StudentRead(BaseModel):
    num_list: int = Field(..., examples=[5])
    name: str = Field(..., examples=["Ana"])
