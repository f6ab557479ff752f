# /boltpath/routers/assignments_router.py

from fastapi import APIRouter, Depends, HTTPException, status, Response
from typing import List, Optional

from ..core.deps import get_current_teacher
from ..models import assignment_model, progress_model
from ..models.teacher_model import Teacher
from ..services import assignment_service, progress_service
from ..services.roster_store import RosterStore, get_roster_store

router = APIRouter()

# --- ASSIGNMENT COLLECTION ENDPOINTS (/api/assignments) ---

@router.get("", response_model=List[assignment_model.PBLAssignment], summary="List the Teacher's PBL Assignments")
def get_assignments(
    search: Optional[str] = None,
    status_filter: Optional[assignment_model.AssignmentStatus] = None,
    store: RosterStore = Depends(get_roster_store),
    teacher: Teacher = Depends(get_current_teacher)
):
    """
    Lists assignments, optionally filtered by a search term over title and
    problem statement and by `status_filter` (omit it for all statuses).
    """
    return assignment_service.list_assignments(store=store, teacher_id=teacher.id, search=search, status=status_filter)

@router.post("", response_model=assignment_model.PBLAssignment, status_code=status.HTTP_201_CREATED, summary="Create a PBL Assignment")
def create_assignment(assignment_create: assignment_model.AssignmentCreate, store: RosterStore = Depends(get_roster_store), teacher: Teacher = Depends(get_current_teacher)):
    try:
        return assignment_service.create_assignment(store=store, assignment_data=assignment_create, teacher_id=teacher.id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

# --- INDIVIDUAL ASSIGNMENT ENDPOINTS (/api/assignments/{assignment_id}) ---

@router.get("/{assignment_id}", response_model=assignment_model.AssignmentDetails, summary="Get an Assignment with Students and Progress")
def get_assignment(assignment_id: str, store: RosterStore = Depends(get_roster_store), teacher: Teacher = Depends(get_current_teacher)):
    details = assignment_service.get_assignment_details(store=store, assignment_id=assignment_id, teacher_id=teacher.id)
    if details is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Assignment with ID {assignment_id} not found")
    return details

@router.put("/{assignment_id}", response_model=assignment_model.PBLAssignment, summary="Update a PBL Assignment")
def update_assignment_details(assignment_id: str, assignment_update: assignment_model.AssignmentUpdate, store: RosterStore = Depends(get_roster_store), teacher: Teacher = Depends(get_current_teacher)):
    try:
        updated = assignment_service.update_assignment(store=store, assignment_id=assignment_id, assignment_update=assignment_update, teacher_id=teacher.id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Assignment with ID {assignment_id} not found")
    return updated

@router.patch("/{assignment_id}/status", response_model=assignment_model.PBLAssignment, summary="Change an Assignment's Status")
def change_assignment_status(assignment_id: str, status_change: assignment_model.StatusChange, store: RosterStore = Depends(get_roster_store), teacher: Teacher = Depends(get_current_teacher)):
    updated = assignment_service.change_status(store=store, assignment_id=assignment_id, new_status=status_change.status, teacher_id=teacher.id)
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Assignment with ID {assignment_id} not found")
    return updated

@router.delete("/{assignment_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a PBL Assignment")
def delete_assignment(assignment_id: str, store: RosterStore = Depends(get_roster_store), teacher: Teacher = Depends(get_current_teacher)):
    was_deleted = assignment_service.delete_assignment(store=store, assignment_id=assignment_id, teacher_id=teacher.id)
    if not was_deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Assignment with ID {assignment_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

# --- PROGRESS SUB-RESOURCE ENDPOINTS ---

@router.get("/{assignment_id}/progress", response_model=List[progress_model.StudentProgress], summary="Get Progress Records for an Assignment")
def get_assignment_progress(assignment_id: str, store: RosterStore = Depends(get_roster_store), teacher: Teacher = Depends(get_current_teacher)):
    records = progress_service.get_assignment_progress(store=store, assignment_id=assignment_id, teacher_id=teacher.id)
    if records is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Assignment with ID {assignment_id} not found")
    return records
