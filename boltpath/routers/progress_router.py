# /boltpath/routers/progress_router.py

from fastapi import APIRouter, Depends, HTTPException, status

from ..core.deps import get_current_teacher
from ..models import progress_model
from ..models.teacher_model import Teacher
from ..services import progress_service
from ..services.roster_store import RosterStore, get_roster_store

router = APIRouter()


@router.put(
    "",  # Maps to /api/progress
    response_model=progress_model.StudentProgress,
    summary="Record a Student's Progress",
    description="Creates or updates the single progress record for a student on an assignment.",
    responses={404: {"description": "Assignment not found"}}
)
def record_student_progress(
    payload: progress_model.ProgressUpdate,
    store: RosterStore = Depends(get_roster_store),
    teacher: Teacher = Depends(get_current_teacher)
):
    """
    Endpoint to upsert progress. The caller does not need to know whether a
    record for the (student, assignment) pair exists yet.
    """
    try:
        return progress_service.record_progress(store=store, payload=payload, teacher_id=teacher.id)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
