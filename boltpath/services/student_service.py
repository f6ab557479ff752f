# /boltpath/services/student_service.py

"""
This service module is the business logic layer for the student roster.

Every function takes the current teacher's id and only ever touches students
that teacher owns; the RosterStore itself holds everyone's records. Request
payloads arrive here already validated by their pydantic models.
"""

import logging
from typing import List, Optional

import pandas as pd

from ..models import student_model
from .roster_store import RosterStore

logger = logging.getLogger(__name__)

ROSTER_EXPORT_COLUMNS = ["Student Name", "Grade", "Phone Number", "Learning Style", "Accommodations"]


def _owned_student(store: RosterStore, student_id: str, teacher_id: str) -> Optional[student_model.Student]:
    student = store.get_student(student_id)
    if student is None or student.teacherId != teacher_id:
        return None
    return student


# --- Query Logic ---

def list_students(store: RosterStore, teacher_id: str, search: Optional[str] = None) -> List[student_model.Student]:
    """
    Returns the teacher's students in insertion order, optionally narrowed to
    those whose name or grade contains `search` (case-insensitive).
    """
    students = [s for s in store.students if s.teacherId == teacher_id]
    if search:
        term = search.lower()
        students = [s for s in students if term in s.fullName.lower() or term in s.grade.lower()]
    return students


def get_student(store: RosterStore, student_id: str, teacher_id: str) -> Optional[student_model.Student]:
    return _owned_student(store, student_id, teacher_id)


# --- Facade Methods for CRUD Operations ---

def create_student(
    store: RosterStore,
    student_data: student_model.StudentCreate,
    teacher_id: str
) -> student_model.Student:
    """
    Adds a student to the teacher's roster. The owner's id is stamped onto the
    record before it is handed to the store.
    """
    record = {"teacherId": teacher_id, **student_data.model_dump()}
    student = store.add_student(record)
    logger.info("Teacher %s added student %s", teacher_id, student.id)
    return student


def update_student(
    store: RosterStore,
    student_id: str,
    student_update: student_model.StudentUpdate,
    teacher_id: str
) -> Optional[student_model.Student]:
    """
    Applies a partial update to one of the teacher's students. Returns None
    when the student does not exist or belongs to another teacher.
    """
    if _owned_student(store, student_id, teacher_id) is None:
        return None
    update_data = student_update.model_dump(exclude_unset=True)
    # An explicit null only makes sense for the optional emergency contact.
    update_data = {k: v for k, v in update_data.items() if v is not None or k == "emergencyContact"}
    if not update_data:
        raise ValueError("No update data provided.")
    return store.update_student(student_id, update_data)


def delete_student(store: RosterStore, student_id: str, teacher_id: str) -> bool:
    """
    Deletes one of the teacher's students. The store removes the student from
    every assignment and discards their progress in the same step.
    """
    if _owned_student(store, student_id, teacher_id) is None:
        return False
    return store.delete_student(student_id)


# --- Export Logic ---

def export_roster_as_csv(store: RosterStore, teacher_id: str) -> str:
    """Generates a CSV of the teacher's whole roster, one row per student."""
    export_data = [
        {
            "Student Name": s.fullName,
            "Grade": s.grade,
            "Phone Number": s.phoneNumber,
            "Learning Style": s.learningProfile.learningStyle.value,
            "Accommodations": len(s.learningProfile.accommodations),
        }
        for s in list_students(store, teacher_id)
    ]

    df = pd.DataFrame(export_data) if export_data else pd.DataFrame(columns=ROSTER_EXPORT_COLUMNS)

    return df.to_csv(index=False)
