# /boltpath/routers/session_router.py

"""
Sign-in for the demo teachers.

A successful login returns the teacher record; the client then sends the
teacher's id in the `X-Teacher-Id` header on every roster request, and its
ID number in `X-Teacher-Id-Number` so `/me` reports the account that signed in.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from ..core.deps import get_current_teacher
from ..models.teacher_model import LoginRequest, LoginResponse, Teacher
from ..services import session_service

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
def login(credentials: LoginRequest):
    teacher = session_service.authenticate(credentials.fullName, credentials.idNumber)
    if teacher is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials. Please check your full name and ID number.",
        )
    return LoginResponse(teacher=teacher, message=f"Welcome back to boltpath, {teacher.fullName}!")


@router.get("/me", response_model=Teacher)
def read_current_teacher(teacher: Teacher = Depends(get_current_teacher)):
    """
    Returns the signed-in account. Without an `X-Teacher-Id-Number` header this
    is the first demo account registered under the shared teacher id.
    """
    return teacher
