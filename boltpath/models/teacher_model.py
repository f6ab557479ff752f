# /boltpath/models/teacher_model.py

import re
from typing import Optional

from pydantic import BaseModel, Field, field_validator

ID_NUMBER_PATTERN = re.compile(r"^[A-Za-z0-9]{3,20}$")


class Teacher(BaseModel):
    """The signed-in teacher. Every student and assignment is owned by one."""
    id: str
    fullName: str
    idNumber: str
    organization: Optional[str] = None


class LoginRequest(BaseModel):
    fullName: str = Field(..., description="The teacher's full name, matched case-insensitively.")
    idNumber: str = Field(..., description="The teacher's 3-20 character alphanumeric ID number.")

    @field_validator("fullName")
    @classmethod
    def full_name_must_be_present(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Full name is required")
        if len(v) < 2:
            raise ValueError("Full name must be at least 2 characters long")
        return v

    @field_validator("idNumber")
    @classmethod
    def id_number_must_be_alphanumeric(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("ID number is required")
        if not ID_NUMBER_PATTERN.match(v):
            raise ValueError("ID number must be 3-20 alphanumeric characters")
        return v


class LoginResponse(BaseModel):
    teacher: Teacher
    message: str
