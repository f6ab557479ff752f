# /boltpath/services/roster_store.py

"""
The in-memory store behind every roster operation.

RosterStore owns the three related collections of the application (students,
PBL assignments and per-student progress records) and is the only place they
are mutated. Students and assignments refer to each other by id alone, so the
delete operations here are responsible for keeping those references
consistent: removing a student strips it from every assignment and drops its
progress, removing an assignment drops its progress.

The store is not teacher-scoped. It holds the full collections and leaves
filtering by owner to the services that consume it. It performs no input
validation either; callers validate before they write.

One instance is created per running application and handed to consumers
through `get_roster_store`.
"""

import logging
import threading
import uuid
from contextlib import contextmanager
from datetime import date
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from fastapi import Request
from pydantic import BaseModel

from ..models.assignment_model import AssignmentStatus, PBLAssignment
from ..models.progress_model import StudentProgress
from ..models.student_model import Student

logger = logging.getLogger(__name__)

ProgressKey = Tuple[str, str]


def generate_id(prefix: str) -> str:
    """Returns a collision-resistant record id such as `stu_1a2b3c4d5e6f`."""
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


def _merge(record: BaseModel, updates: Dict[str, Any]) -> BaseModel:
    # Shallow merge: a supplied nested object replaces the stored one whole.
    changes = {key: value for key, value in updates.items() if key != "id"}
    return type(record).model_validate({**record.model_dump(), **changes})


class RosterStore:
    def __init__(
        self,
        students: Optional[Iterable[Student]] = None,
        assignments: Optional[Iterable[PBLAssignment]] = None,
        progress: Optional[Iterable[StudentProgress]] = None,
        id_factory: Callable[[str], str] = generate_id,
        clock: Callable[[], date] = date.today,
    ):
        """
        Builds a store, optionally pre-loaded with existing records.

        Pre-loaded records keep their ids and statuses as given. Progress
        records must already be unique per (studentId, assignmentId).
        """
        self._students: List[Student] = list(students or [])
        self._assignments: List[PBLAssignment] = list(assignments or [])
        self._progress: List[StudentProgress] = []
        self._id_factory = id_factory
        self._clock = clock
        # FastAPI runs sync handlers in a threadpool; each mutation holds the lock.
        self._lock = threading.RLock()

        seen = set()
        for record in progress or []:
            key = (record.studentId, record.assignmentId)
            if key in seen:
                raise ValueError(f"Duplicate progress record for student {key[0]} on assignment {key[1]}")
            seen.add(key)
            self._progress.append(record)

    @contextmanager
    def locked(self) -> Iterator["RosterStore"]:
        """
        Holds the store lock for the duration of the block. Services use it to
        check the collections and write to them as one step; the lock is
        reentrant, so store methods called inside the block still work.
        """
        with self._lock:
            yield self

    # --- Read Access ---
    # Full-collection snapshots. The lists are copies, the records are the
    # stored instances; mutations always replace records rather than edit them.

    @property
    def students(self) -> List[Student]:
        with self._lock:
            return list(self._students)

    @property
    def assignments(self) -> List[PBLAssignment]:
        with self._lock:
            return list(self._assignments)

    @property
    def progress(self) -> List[StudentProgress]:
        with self._lock:
            return list(self._progress)

    def get_student(self, student_id: str) -> Optional[Student]:
        with self._lock:
            return next((s for s in self._students if s.id == student_id), None)

    def get_assignment(self, assignment_id: str) -> Optional[PBLAssignment]:
        with self._lock:
            return next((a for a in self._assignments if a.id == assignment_id), None)

    def get_progress(self, student_id: str, assignment_id: str) -> Optional[StudentProgress]:
        with self._lock:
            index = self._progress_index((student_id, assignment_id))
            return self._progress[index] if index is not None else None

    # --- Student Methods ---

    def add_student(self, data: Dict[str, Any]) -> Student:
        """Stores a new student under a fresh id and returns the created record."""
        with self._lock:
            student = Student.model_validate({**data, "id": self._id_factory("stu")})
            self._students.append(student)
        logger.debug("Added student %s for teacher %s", student.id, student.teacherId)
        return student

    def update_student(self, student_id: str, updates: Dict[str, Any]) -> Optional[Student]:
        """
        Merges `updates` onto the student with this id.

        Returns the updated record, or None (and changes nothing) when no such
        student exists.
        """
        with self._lock:
            for index, student in enumerate(self._students):
                if student.id == student_id:
                    updated = _merge(student, updates)
                    self._students[index] = updated
                    logger.debug("Updated student %s (%s)", student_id, ", ".join(sorted(updates)))
                    return updated
        logger.debug("Update skipped: student %s not found", student_id)
        return None

    def delete_student(self, student_id: str) -> bool:
        """
        Removes a student, the student's id from every assignment roster and
        every progress record for that student. Returns False if the student
        did not exist, in which case nothing changes.
        """
        with self._lock:
            remaining = [s for s in self._students if s.id != student_id]
            if len(remaining) == len(self._students):
                logger.debug("Delete skipped: student %s not found", student_id)
                return False

            assignments = []
            unassigned = 0
            for assignment in self._assignments:
                if student_id in assignment.studentIds:
                    unassigned += 1
                    assignment = assignment.model_copy(
                        update={"studentIds": [i for i in assignment.studentIds if i != student_id]}
                    )
                assignments.append(assignment)
            progress = [p for p in self._progress if p.studentId != student_id]
            dropped = len(self._progress) - len(progress)

            self._students = remaining
            self._assignments = assignments
            self._progress = progress
        logger.info(
            "Deleted student %s: unassigned from %d assignment(s), dropped %d progress record(s)",
            student_id, unassigned, dropped,
        )
        return True

    # --- Assignment Methods ---

    def add_assignment(self, data: Dict[str, Any]) -> PBLAssignment:
        """Stores a new assignment under a fresh id. New assignments always start as drafts."""
        with self._lock:
            assignment = PBLAssignment.model_validate(
                {**data, "id": self._id_factory("pbl"), "status": AssignmentStatus.DRAFT}
            )
            self._assignments.append(assignment)
        logger.debug("Added assignment %s for teacher %s", assignment.id, assignment.teacherId)
        return assignment

    def update_assignment(self, assignment_id: str, updates: Dict[str, Any]) -> Optional[PBLAssignment]:
        """
        Merges `updates` onto the assignment with this id. Any status may be
        set from any other. Returns None when the assignment does not exist.
        """
        with self._lock:
            for index, assignment in enumerate(self._assignments):
                if assignment.id == assignment_id:
                    updated = _merge(assignment, updates)
                    self._assignments[index] = updated
                    logger.debug("Updated assignment %s (%s)", assignment_id, ", ".join(sorted(updates)))
                    return updated
        logger.debug("Update skipped: assignment %s not found", assignment_id)
        return None

    def delete_assignment(self, assignment_id: str) -> bool:
        """Removes an assignment and all progress recorded against it."""
        with self._lock:
            remaining = [a for a in self._assignments if a.id != assignment_id]
            if len(remaining) == len(self._assignments):
                logger.debug("Delete skipped: assignment %s not found", assignment_id)
                return False
            progress = [p for p in self._progress if p.assignmentId != assignment_id]
            dropped = len(self._progress) - len(progress)
            self._assignments = remaining
            self._progress = progress
        logger.info("Deleted assignment %s: dropped %d progress record(s)", assignment_id, dropped)
        return True

    # --- Progress Methods ---

    def upsert_student_progress(self, update: Dict[str, Any]) -> StudentProgress:
        """
        Creates or updates the progress record for the update's
        (studentId, assignmentId) pair and stamps it with today's date.

        Callers never need to know whether a record already exists: a missing
        one is built from the defaults (phase 0, empty lists and notes) and
        then overlaid with the update.
        """
        key = (update["studentId"], update["assignmentId"])
        with self._lock:
            stamped = {**update, "lastUpdated": self._clock()}
            index = self._progress_index(key)
            if index is not None:
                record = _merge(self._progress[index], stamped)
                self._progress[index] = record
                logger.debug("Updated progress for student %s on assignment %s", *key)
            else:
                record = StudentProgress.model_validate(stamped)
                self._progress.append(record)
                logger.debug("Created progress for student %s on assignment %s", *key)
        return record

    def _progress_index(self, key: ProgressKey) -> Optional[int]:
        for index, record in enumerate(self._progress):
            if (record.studentId, record.assignmentId) == key:
                return index
        return None


# --- Dependency Provider ---

def get_roster_store(request: Request) -> RosterStore:
    """
    FastAPI dependency that provides the application's RosterStore, which is
    created once in the lifespan handler and kept on `app.state`.
    """
    return request.app.state.roster_store
