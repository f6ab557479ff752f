# /boltpath/core/deps.py

from fastapi import Header, HTTPException, status

from ..models.teacher_model import Teacher
from ..services import session_service


def get_current_teacher(
    x_teacher_id: str = Header(default=""),
    x_teacher_id_number: str = Header(default="")
) -> Teacher:
    """
    Resolves the teacher named by the `X-Teacher-Id` header. Every roster
    route depends on this to scope what it reads and writes. The optional
    `X-Teacher-Id-Number` header tells apart demo accounts sharing that id.
    """
    teacher = (
        session_service.get_teacher_by_id(x_teacher_id, x_teacher_id_number)
        if x_teacher_id else None
    )
    if teacher is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Sign in first: the X-Teacher-Id header is missing or unknown.",
        )
    return teacher
