# /boltpath/routers/students_router.py

from fastapi import APIRouter, Depends, HTTPException, status, Response
from fastapi.responses import StreamingResponse
from typing import List, Optional

from ..core.deps import get_current_teacher
from ..models import student_model
from ..models.teacher_model import Teacher
from ..services import student_service
from ..services.roster_store import RosterStore, get_roster_store

router = APIRouter()

# --- STUDENT COLLECTION ENDPOINTS (/api/students) ---

@router.get("", response_model=List[student_model.Student], summary="List the Teacher's Students")
def get_students(search: Optional[str] = None, store: RosterStore = Depends(get_roster_store), teacher: Teacher = Depends(get_current_teacher)):
    return student_service.list_students(store=store, teacher_id=teacher.id, search=search)

@router.post("", response_model=student_model.Student, status_code=status.HTTP_201_CREATED, summary="Add a Student Profile")
def create_student(student_create: student_model.StudentCreate, store: RosterStore = Depends(get_roster_store), teacher: Teacher = Depends(get_current_teacher)):
    return student_service.create_student(store=store, student_data=student_create, teacher_id=teacher.id)

@router.get("/export", summary="Export the Roster as CSV", response_class=StreamingResponse)
def export_roster_csv(store: RosterStore = Depends(get_roster_store), teacher: Teacher = Depends(get_current_teacher)):
    csv_string = student_service.export_roster_as_csv(store=store, teacher_id=teacher.id)
    file_name = f"roster_{teacher.idNumber.lower()}.csv"
    return StreamingResponse(iter([csv_string]), media_type="text/csv", headers={"Content-Disposition": f"attachment; filename={file_name}"})

# --- INDIVIDUAL STUDENT ENDPOINTS (/api/students/{student_id}) ---

@router.get("/{student_id}", response_model=student_model.Student, summary="Get a Single Student Profile")
def get_student(student_id: str, store: RosterStore = Depends(get_roster_store), teacher: Teacher = Depends(get_current_teacher)):
    student = student_service.get_student(store=store, student_id=student_id, teacher_id=teacher.id)
    if student is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Student with ID {student_id} not found")
    return student

@router.put("/{student_id}", response_model=student_model.Student, summary="Update a Student Profile")
def update_student_details(student_id: str, student_update: student_model.StudentUpdate, store: RosterStore = Depends(get_roster_store), teacher: Teacher = Depends(get_current_teacher)):
    try:
        updated_student = student_service.update_student(store=store, student_id=student_id, student_update=student_update, teacher_id=teacher.id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if updated_student is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Student with ID {student_id} not found")
    return updated_student

@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a Student Profile")
def delete_student(student_id: str, store: RosterStore = Depends(get_roster_store), teacher: Teacher = Depends(get_current_teacher)):
    was_deleted = student_service.delete_student(store=store, student_id=student_id, teacher_id=teacher.id)
    if not was_deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Student with ID {student_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
