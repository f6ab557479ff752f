# /boltpath/models/progress_model.py

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class StudentProgress(BaseModel):
    """
    A student's progress through one PBL assignment. Records are keyed by the
    (studentId, assignmentId) pair; the store keeps at most one per pair.
    """
    model_config = ConfigDict(from_attributes=True)

    studentId: str
    assignmentId: str
    # Index into the assignment timeline; len(timeline) means all phases done.
    currentPhase: int = 0
    completedActivities: List[str] = Field(default_factory=list)
    reflectionNotes: str = ""
    teacherObservations: str = ""
    accommodationsUsed: List[str] = Field(default_factory=list)
    lastUpdated: date


class ProgressUpdate(BaseModel):
    """
    The payload for recording progress. Only the composite key is required;
    any omitted field keeps its stored value (or its default on first write).
    """
    studentId: str = Field(..., min_length=1)
    assignmentId: str = Field(..., min_length=1)
    currentPhase: Optional[int] = Field(default=None, ge=0)
    completedActivities: Optional[List[str]] = None
    reflectionNotes: Optional[str] = None
    teacherObservations: Optional[str] = None
    accommodationsUsed: Optional[List[str]] = None
