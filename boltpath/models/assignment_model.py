# /boltpath/models/assignment_model.py

from datetime import date, timedelta
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .student_model import Student


# --- Core Enumerations ---
class AssignmentStatus(str, Enum):
    DRAFT = "draft"; ACTIVE = "active"; COMPLETED = "completed"; ARCHIVED = "archived"

class CollaborationType(str, Enum):
    INDIVIDUAL = "individual"
    PAIRS = "pairs"
    SMALL_GROUPS = "small-groups"
    WHOLE_CLASS = "whole-class"


# --- Nested Models ---

class AssessmentCriterion(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    criterion: str
    # Weights across criteria are not required to sum to 100.
    weight: int = Field(default=25, ge=0, le=100)
    rubric: str = Field(default="", description="Free-text rubric for this criterion. Can be an empty string.")

class TimelinePhase(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    phase: str
    duration: str = Field(default="", description="Free-text duration label, e.g. '2 weeks'.")
    activities: List[str] = Field(default_factory=list)


# --- Record Models ---

class AssignmentBase(BaseModel):
    title: str
    problemStatement: str
    realWorldContext: str
    learningObjectives: List[str] = Field(default_factory=list)
    assessmentCriteria: List[AssessmentCriterion] = Field(default_factory=list)
    resources: List[str] = Field(default_factory=list)
    timeline: List[TimelinePhase] = Field(default_factory=list)
    dueDate: date
    studentIds: List[str] = Field(default_factory=list)
    collaborationType: CollaborationType = Field(default=CollaborationType.SMALL_GROUPS)
    skillsFocus: List[str] = Field(default_factory=list)

class PBLAssignment(AssignmentBase):
    """
    A problem-based-learning assignment as held by the RosterStore. Students
    are referenced by id only.
    """
    model_config = ConfigDict(from_attributes=True)
    id: str = Field(..., description="The unique, store-generated identifier for the assignment.")
    teacherId: str = Field(..., description="The ID of the teacher who owns this assignment.")
    status: AssignmentStatus = Field(default=AssignmentStatus.DRAFT)


# --- Request Validation Helpers ---

def _required(value: Optional[str], label: str) -> Optional[str]:
    if value is not None and not value.strip():
        raise ValueError(f"{label} is required")
    return value

def _drop_blank_items(items: Optional[List[str]]) -> Optional[List[str]]:
    if items is None:
        return items
    return [item.strip() for item in items if item.strip()]


# --- API Contract Models ---

class AssignmentCreate(AssignmentBase):
    """
    The payload for creating an assignment. Any status sent by the client is
    ignored; new assignments always start as drafts.
    """

    @field_validator("title")
    @classmethod
    def title_required(cls, v):
        return _required(v, "Title")

    @field_validator("problemStatement")
    @classmethod
    def problem_statement_required(cls, v):
        return _required(v, "Problem statement")

    @field_validator("realWorldContext")
    @classmethod
    def real_world_context_required(cls, v):
        return _required(v, "Real-world context")

    @field_validator("resources", "skillsFocus")
    @classmethod
    def strip_blank_entries(cls, v):
        return _drop_blank_items(v)

    @field_validator("learningObjectives")
    @classmethod
    def objectives_must_not_be_empty(cls, v):
        v = _drop_blank_items(v)
        if not v:
            raise ValueError("At least one learning objective is required")
        return v

    @field_validator("studentIds")
    @classmethod
    def students_must_not_be_empty(cls, v):
        if not v:
            raise ValueError("At least one student must be selected")
        return v

    @field_validator("dueDate")
    @classmethod
    def due_date_not_in_past(cls, v):
        tomorrow = date.today() + timedelta(days=1)
        if v < tomorrow:
            raise ValueError(f"Due date must be on or after {tomorrow.isoformat()}")
        return v


class AssignmentUpdate(BaseModel):
    """
    Partial update of an assignment's content. Status changes go through
    StatusChange instead, and an existing due date may lie in the past.
    """
    model_config = ConfigDict(from_attributes=True)

    title: Optional[str] = None
    problemStatement: Optional[str] = None
    realWorldContext: Optional[str] = None
    learningObjectives: Optional[List[str]] = None
    assessmentCriteria: Optional[List[AssessmentCriterion]] = None
    resources: Optional[List[str]] = None
    timeline: Optional[List[TimelinePhase]] = None
    dueDate: Optional[date] = None
    studentIds: Optional[List[str]] = None
    collaborationType: Optional[CollaborationType] = None
    skillsFocus: Optional[List[str]] = None

    @field_validator("title")
    @classmethod
    def title_required(cls, v):
        return _required(v, "Title")

    @field_validator("problemStatement")
    @classmethod
    def problem_statement_required(cls, v):
        return _required(v, "Problem statement")

    @field_validator("realWorldContext")
    @classmethod
    def real_world_context_required(cls, v):
        return _required(v, "Real-world context")

    @field_validator("resources", "skillsFocus")
    @classmethod
    def strip_blank_entries(cls, v):
        return _drop_blank_items(v)

    @field_validator("learningObjectives")
    @classmethod
    def objectives_must_not_be_empty(cls, v):
        v = _drop_blank_items(v)
        if v is not None and not v:
            raise ValueError("At least one learning objective is required")
        return v

    @field_validator("studentIds")
    @classmethod
    def students_must_not_be_empty(cls, v):
        if v is not None and not v:
            raise ValueError("At least one student must be selected")
        return v


class StatusChange(BaseModel):
    status: AssignmentStatus


class StudentProgressSummary(BaseModel):
    """One assigned student's standing on an assignment, as shown on the tracking view."""
    studentId: str
    fullName: str
    currentPhase: int = 0
    percentage: int = Field(default=0, ge=0)
    lastUpdated: Optional[date] = None


class AssignmentDetails(PBLAssignment):
    """
    The assignment as rendered on its card: the stored record enriched with
    the assigned students the teacher owns, the overdue flag and progress.
    """
    assignedStudents: List[Student] = Field(default_factory=list)
    isOverdue: bool = False
    progress: List[StudentProgressSummary] = Field(default_factory=list)
    criteriaWeightTotal: int = 0
    phaseCount: int = 0
    objectiveCount: int = 0
