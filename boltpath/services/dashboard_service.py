# /boltpath/services/dashboard_service.py

# --- Core Imports ---
import logging

# Import the Pydantic models to ensure our output matches the data contract.
from ..models.dashboard_model import DashboardSummary, RecentAssignment, RecentStudent
from ..models.assignment_model import AssignmentStatus
from .roster_store import RosterStore

logger = logging.getLogger(__name__)

RECENT_STUDENT_LIMIT = 5
RECENT_ASSIGNMENT_LIMIT = 5


def get_summary_data(store: RosterStore, teacher_id: str) -> DashboardSummary:
    """
    Calculates the overview statistics for one teacher from the full
    collections held by the store.

    Args:
        store: The application's RosterStore, provided by dependency injection.
        teacher_id: The signed-in teacher whose records are counted.

    Returns:
        A DashboardSummary with the counts and the first few students and
        assignments on the teacher's lists.
    """
    students = [s for s in store.students if s.teacherId == teacher_id]
    assignments = [a for a in store.assignments if a.teacherId == teacher_id]

    def count(status: AssignmentStatus) -> int:
        return sum(1 for a in assignments if a.status == status)

    recent = [
        RecentStudent(
            id=s.id,
            fullName=s.fullName,
            grade=s.grade,
            learningStyle=s.learningProfile.learningStyle,
            accommodationCount=len(s.learningProfile.accommodations),
        )
        for s in students[:RECENT_STUDENT_LIMIT]
    ]
    recent_assignments = [
        RecentAssignment(
            id=a.id,
            title=a.title,
            dueDate=a.dueDate,
            collaborationType=a.collaborationType,
            status=a.status,
            studentCount=len(a.studentIds),
        )
        for a in assignments[:RECENT_ASSIGNMENT_LIMIT]
    ]
    logger.debug("Summary for %s: %d students, %d assignments", teacher_id, len(students), len(assignments))

    return DashboardSummary(
        totalStudents=len(students),
        totalAssignments=len(assignments),
        draftAssignments=count(AssignmentStatus.DRAFT),
        activeAssignments=count(AssignmentStatus.ACTIVE),
        completedAssignments=count(AssignmentStatus.COMPLETED),
        recentStudents=recent,
        recentAssignments=recent_assignments,
    )
