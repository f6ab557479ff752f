# /boltpath/services/assignment_service.py

"""
This service module acts as the business logic layer for PBL assignments.

It scopes every read and write to the current teacher, applies the
assignment-form rules that sit above the store (new assignments start as
drafts, statuses change freely) and assembles the enriched card view the
assignment list renders.
"""

import logging
from datetime import date
from typing import List, Optional

from ..models import assignment_model
from ..models.assignment_model import AssignmentStatus, PBLAssignment
from .progress_service import summarize_progress
from .roster_store import RosterStore

logger = logging.getLogger(__name__)


def is_overdue(assignment: PBLAssignment, today: Optional[date] = None) -> bool:
    """An assignment is overdue from its due date onwards, unless it was completed."""
    today = today or date.today()
    return assignment.dueDate <= today and assignment.status != AssignmentStatus.COMPLETED


def _check_roster(store: RosterStore, student_ids: List[str], teacher_id: str) -> None:
    owned = {s.id for s in store.students if s.teacherId == teacher_id}
    unknown = [i for i in student_ids if i not in owned]
    if unknown:
        raise ValueError(f"Unknown student ID(s): {', '.join(unknown)}")


def _owned_assignment(store: RosterStore, assignment_id: str, teacher_id: str) -> Optional[PBLAssignment]:
    assignment = store.get_assignment(assignment_id)
    if assignment is None or assignment.teacherId != teacher_id:
        return None
    return assignment


# --- Query Logic ---

def list_assignments(
    store: RosterStore,
    teacher_id: str,
    search: Optional[str] = None,
    status: Optional[AssignmentStatus] = None
) -> List[PBLAssignment]:
    """
    Returns the teacher's assignments, optionally narrowed by a
    case-insensitive search over title and problem statement and by status.
    """
    assignments = [a for a in store.assignments if a.teacherId == teacher_id]
    if search:
        term = search.lower()
        assignments = [
            a for a in assignments
            if term in a.title.lower() or term in a.problemStatement.lower()
        ]
    if status is not None:
        assignments = [a for a in assignments if a.status == status]
    return assignments


def get_assignment_details(
    store: RosterStore,
    assignment_id: str,
    teacher_id: str,
    today: Optional[date] = None
) -> Optional[assignment_model.AssignmentDetails]:
    """
    Assembles everything the assignment card shows: the record itself, the
    assigned students the teacher owns, the overdue flag and each assigned
    student's progress through the timeline.
    """
    assignment = _owned_assignment(store, assignment_id, teacher_id)
    if assignment is None:
        return None

    assigned_students = [
        s for s in store.students
        if s.teacherId == teacher_id and s.id in assignment.studentIds
    ]
    return assignment_model.AssignmentDetails(
        **assignment.model_dump(),
        assignedStudents=assigned_students,
        isOverdue=is_overdue(assignment, today),
        progress=summarize_progress(store, assignment, [s.id for s in assigned_students]),
        criteriaWeightTotal=sum(c.weight for c in assignment.assessmentCriteria),
        phaseCount=len(assignment.timeline),
        objectiveCount=len(assignment.learningObjectives),
    )


# --- Facade Methods for CRUD Operations ---

def create_assignment(
    store: RosterStore,
    assignment_data: assignment_model.AssignmentCreate,
    teacher_id: str
) -> PBLAssignment:
    """
    Business logic to create a new assignment for the teacher. The payload
    model has already dropped blank objectives, resources and skills; the
    store forces the draft status.
    """
    record = {"teacherId": teacher_id, **assignment_data.model_dump()}
    # The roster check and the write must not interleave with a student delete.
    with store.locked():
        _check_roster(store, assignment_data.studentIds, teacher_id)
        assignment = store.add_assignment(record)
    logger.info("Teacher %s created assignment %s", teacher_id, assignment.id)
    return assignment


def update_assignment(
    store: RosterStore,
    assignment_id: str,
    assignment_update: assignment_model.AssignmentUpdate,
    teacher_id: str
) -> Optional[PBLAssignment]:
    update_data = {
        k: v for k, v in assignment_update.model_dump(exclude_unset=True).items() if v is not None
    }
    with store.locked():
        if _owned_assignment(store, assignment_id, teacher_id) is None:
            return None
        if not update_data:
            raise ValueError("No update data provided.")
        if "studentIds" in update_data:
            _check_roster(store, update_data["studentIds"], teacher_id)
        return store.update_assignment(assignment_id, update_data)


def change_status(
    store: RosterStore,
    assignment_id: str,
    new_status: AssignmentStatus,
    teacher_id: str
) -> Optional[PBLAssignment]:
    """
    Moves an assignment to `new_status`. Every status is reachable from every
    other, including back to draft.
    """
    if _owned_assignment(store, assignment_id, teacher_id) is None:
        return None
    logger.info("Assignment %s status set to %s", assignment_id, new_status.value)
    return store.update_assignment(assignment_id, {"status": new_status})


def delete_assignment(store: RosterStore, assignment_id: str, teacher_id: str) -> bool:
    if _owned_assignment(store, assignment_id, teacher_id) is None:
        return False
    return store.delete_assignment(assignment_id)
