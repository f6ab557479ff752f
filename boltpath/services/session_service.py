# /boltpath/services/session_service.py

"""
The session context: who the current teacher is.

Sign-in is a lookup against a fixed directory of demo teachers. It identifies
the teacher whose records should be shown and is not a security mechanism.
"""

import logging
from typing import Dict, List, Optional

from ..models.teacher_model import Teacher
from .mock_data import DEMO_TEACHER_ID

logger = logging.getLogger(__name__)

# Every demo account signs in as the same teacher so they all see the demo roster.
TEACHER_DIRECTORY: List[Dict[str, str]] = [
    {"fullName": "John Smith", "idNumber": "TEACH001"},
    {"fullName": "Sarah Johnson", "idNumber": "TEACH002"},
    {"fullName": "User name", "idNumber": "DEMO123"},
]


def authenticate(full_name: str, id_number: str) -> Optional[Teacher]:
    """
    Finds the directory entry matching both the name and the ID number,
    ignoring case and surrounding whitespace. Returns None when nothing matches.
    """
    name_key = full_name.strip().lower()
    id_key = id_number.strip().lower()
    for entry in TEACHER_DIRECTORY:
        if entry["fullName"].lower() == name_key and entry["idNumber"].lower() == id_key:
            logger.info("Teacher %s signed in", entry["idNumber"])
            return Teacher(id=DEMO_TEACHER_ID, fullName=entry["fullName"], idNumber=entry["idNumber"])
    logger.warning("Sign-in rejected for ID number %s", id_number)
    return None


def get_teacher_by_id(teacher_id: str, id_number: Optional[str] = None) -> Optional[Teacher]:
    """
    Resolves a teacher id to a directory entry. Since every demo account
    shares one id, `id_number` picks the account that signed in; without it
    (or when it names no account) the first entry registered under the id
    is returned.
    """
    if teacher_id != DEMO_TEACHER_ID:
        return None
    id_key = (id_number or "").strip().lower()
    entry = next(
        (e for e in TEACHER_DIRECTORY if e["idNumber"].lower() == id_key),
        TEACHER_DIRECTORY[0],
    )
    return Teacher(id=DEMO_TEACHER_ID, fullName=entry["fullName"], idNumber=entry["idNumber"])
