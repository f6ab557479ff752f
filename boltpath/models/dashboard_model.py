# /boltpath/models/dashboard_model.py

# --- Core Imports ---
from datetime import date
from typing import List

from pydantic import BaseModel, Field

from .assignment_model import AssignmentStatus, CollaborationType
from .student_model import LearningStyle


class RecentStudent(BaseModel):
    id: str
    fullName: str
    grade: str
    learningStyle: LearningStyle
    accommodationCount: int = 0


class RecentAssignment(BaseModel):
    id: str
    title: str
    dueDate: date
    collaborationType: CollaborationType
    status: AssignmentStatus
    studentCount: int = Field(default=0, description="Number of students assigned.")


class DashboardSummary(BaseModel):
    """
    Defines the data contract for the response of the dashboard summary endpoint.
    These are the statistics cards plus the "Recent Students" and "Recent PBL
    Assignments" lists of the teacher's overview tab.
    """

    totalStudents: int = Field(..., description="Students with a learning profile owned by the teacher.", examples=[2])
    totalAssignments: int = Field(..., description="PBL assignments owned by the teacher.", examples=[1])
    draftAssignments: int = Field(default=0, examples=[0])
    activeAssignments: int = Field(default=0, description="Assignments currently running.", examples=[1])
    completedAssignments: int = Field(default=0, description="Finished projects.", examples=[0])
    recentStudents: List[RecentStudent] = Field(default_factory=list)
    recentAssignments: List[RecentAssignment] = Field(default_factory=list)
