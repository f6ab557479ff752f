# /boltpath/services/progress_service.py

"""
Progress tracking for students working through PBL assignments.
"""

import logging
from typing import List, Optional

from ..models.assignment_model import PBLAssignment, StudentProgressSummary
from ..models.progress_model import ProgressUpdate, StudentProgress
from .roster_store import RosterStore

logger = logging.getLogger(__name__)


def calculate_progress_percentage(progress: Optional[StudentProgress], assignment: PBLAssignment) -> int:
    """Share of the assignment's timeline phases the student has moved past, as a whole percent."""
    if progress is None:
        return 0
    total_phases = len(assignment.timeline)
    if total_phases == 0:
        return 0
    return round(progress.currentPhase / total_phases * 100)


def record_progress(store: RosterStore, payload: ProgressUpdate, teacher_id: str) -> StudentProgress:
    """
    Writes progress for one student on one of the teacher's assignments.

    Raises:
        LookupError: the assignment does not exist or belongs to another teacher.
        ValueError: the student is not assigned to the assignment, or the phase
            lies beyond the end of the timeline.
    """
    update = {k: v for k, v in payload.model_dump(exclude_unset=True).items() if v is not None}
    # Held until the upsert so a student or assignment delete cannot slip in after the checks.
    with store.locked():
        assignment = store.get_assignment(payload.assignmentId)
        if assignment is None or assignment.teacherId != teacher_id:
            raise LookupError(f"Assignment with ID {payload.assignmentId} not found")
        if payload.studentId not in assignment.studentIds:
            logger.warning("Rejected progress for unassigned student %s on %s", payload.studentId, assignment.id)
            raise ValueError(f"Student {payload.studentId} is not assigned to assignment {assignment.id}")
        if payload.currentPhase is not None and payload.currentPhase > len(assignment.timeline):
            raise ValueError(
                f"Phase {payload.currentPhase} is beyond the {len(assignment.timeline)} phase timeline"
            )
        return store.upsert_student_progress(update)


def summarize_progress(store: RosterStore, assignment: PBLAssignment, student_ids: List[str]) -> List[StudentProgressSummary]:
    """Builds the tracking rows for the given students on one assignment."""
    students = {s.id: s for s in store.students}
    summaries = []
    for student_id in student_ids:
        student = students.get(student_id)
        if student is None:
            continue
        progress = store.get_progress(student_id, assignment.id)
        summaries.append(StudentProgressSummary(
            studentId=student_id,
            fullName=student.fullName,
            currentPhase=progress.currentPhase if progress else 0,
            percentage=calculate_progress_percentage(progress, assignment),
            lastUpdated=progress.lastUpdated if progress else None,
        ))
    return summaries


def get_assignment_progress(store: RosterStore, assignment_id: str, teacher_id: str) -> Optional[List[StudentProgress]]:
    """
    Returns the raw progress records of one of the teacher's assignments, or
    None when the assignment is not the teacher's.
    """
    assignment = store.get_assignment(assignment_id)
    if assignment is None or assignment.teacherId != teacher_id:
        return None
    return [p for p in store.progress if p.assignmentId == assignment_id]
