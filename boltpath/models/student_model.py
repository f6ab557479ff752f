# /boltpath/models/student_model.py

# --- Core Imports ---
import re
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Phone numbers are stored in the display format the roster form produces.
PHONE_PATTERN = re.compile(r"^\(\d{3}\) \d{3}-\d{4}$")


# --- Enumerations ---
class LearningStyle(str, Enum):
    VISUAL = "visual"
    AUDITORY = "auditory"
    KINESTHETIC = "kinesthetic"
    READING_WRITING = "reading-writing"
    MIXED = "mixed"


# --- Embedded Value Models ---

class LearningProfile(BaseModel):
    """
    A student's preferred learning modality together with the strengths,
    challenges and supports a teacher has recorded for them. The string lists
    are free text; duplicates are tolerated.
    """
    model_config = ConfigDict(from_attributes=True)

    learningStyle: LearningStyle = Field(default=LearningStyle.MIXED)
    strengths: List[str] = Field(default_factory=list)
    challenges: List[str] = Field(default_factory=list)
    accommodations: List[str] = Field(default_factory=list)
    preferredAssessmentMethods: List[str] = Field(default_factory=list)
    notes: str = Field(default="")


class EmergencyContact(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str = ""
    relationship: str = ""
    phone: str = ""


# --- Record Models ---

class StudentBase(BaseModel):
    """
    The fields shared by stored students and the create/update payloads.
    """
    fullName: str = Field(..., description="The student's display name.")
    grade: str = Field(..., description="Grade or cohort label, e.g. '10th Grade'.")
    phoneNumber: str = Field(..., description="Contact phone number in (XXX) XXX-XXXX format.")
    learningProfile: LearningProfile = Field(default_factory=LearningProfile)
    emergencyContact: Optional[EmergencyContact] = Field(default=None)


class Student(StudentBase):
    """
    The full representation of a Student as it is held by the RosterStore.
    No input validation happens at this level; the store trusts its callers.
    """
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="The unique, store-generated identifier for the student.")
    teacherId: str = Field(..., description="The ID of the teacher who owns this student.")


# --- Request Validation Helpers ---

def _require_text(value: Optional[str], label: str, min_length: int = 1) -> Optional[str]:
    if value is None:
        return value
    stripped = value.strip()
    if not stripped:
        raise ValueError(f"{label} is required")
    if len(stripped) < min_length:
        raise ValueError(f"{label} must be at least {min_length} characters long")
    return stripped


def format_phone_number(value: str) -> str:
    """
    Reformats whatever digits `value` contains into the (XXX) XXX-XXXX display
    format, progressively for partial input and truncated at ten digits.
    """
    digits = re.sub(r"\D", "", value)
    if len(digits) <= 3:
        return digits
    if len(digits) <= 6:
        return f"({digits[:3]}) {digits[3:]}"
    return f"({digits[:3]}) {digits[3:6]}-{digits[6:10]}"


def _check_phone(value: Optional[str], label: str = "Phone number") -> Optional[str]:
    if value is None:
        return value
    if not value.strip():
        raise ValueError(f"{label} is required")
    value = format_phone_number(value)
    if not PHONE_PATTERN.match(value):
        raise ValueError(f"{label} must be in format (XXX) XXX-XXXX")
    return value


def _blank_contact_to_none(value):
    # The roster form always submits the contact block, empty or not.
    if isinstance(value, dict) and not any(str(v).strip() for v in value.values() if v is not None):
        return None
    if isinstance(value, EmergencyContact) and not any(
        part.strip() for part in (value.name, value.relationship, value.phone)
    ):
        return None
    return value


def _check_contact_phone(value: Optional[EmergencyContact]) -> Optional[EmergencyContact]:
    if value is None or not value.phone.strip():
        return value
    return value.model_copy(update={"phone": _check_phone(value.phone, "Emergency contact phone")})


# --- Request Models ---

class StudentCreate(StudentBase):
    """The payload for adding a student. The owning teacher is stamped by the service."""

    @field_validator("fullName")
    @classmethod
    def full_name_must_be_present(cls, v):
        return _require_text(v, "Full name", min_length=2)

    @field_validator("grade")
    @classmethod
    def grade_must_be_present(cls, v):
        return _require_text(v, "Grade/class")

    @field_validator("phoneNumber")
    @classmethod
    def phone_must_match_format(cls, v):
        return _check_phone(v)

    @field_validator("emergencyContact", mode="before")
    @classmethod
    def drop_blank_contact(cls, v):
        return _blank_contact_to_none(v)

    @field_validator("emergencyContact")
    @classmethod
    def contact_phone_must_match_format(cls, v):
        return _check_contact_phone(v)


class StudentUpdate(BaseModel):
    """
    The model for updating a student. All fields are optional to allow for
    partial updates. A supplied learningProfile or emergencyContact replaces
    the stored one entirely.
    """
    model_config = ConfigDict(from_attributes=True)

    fullName: Optional[str] = Field(default=None)
    grade: Optional[str] = Field(default=None)
    phoneNumber: Optional[str] = Field(default=None)
    learningProfile: Optional[LearningProfile] = Field(default=None)
    emergencyContact: Optional[EmergencyContact] = Field(default=None)

    @field_validator("fullName")
    @classmethod
    def full_name_must_be_present(cls, v):
        return _require_text(v, "Full name", min_length=2)

    @field_validator("grade")
    @classmethod
    def grade_must_be_present(cls, v):
        return _require_text(v, "Grade/class")

    @field_validator("phoneNumber")
    @classmethod
    def phone_must_match_format(cls, v):
        return _check_phone(v)

    @field_validator("emergencyContact", mode="before")
    @classmethod
    def drop_blank_contact(cls, v):
        return _blank_contact_to_none(v)

    @field_validator("emergencyContact")
    @classmethod
    def contact_phone_must_match_format(cls, v):
        return _check_contact_phone(v)
