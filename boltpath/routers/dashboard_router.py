# /boltpath/routers/dashboard_router.py

# --- Core FastAPI Imports ---
from fastapi import APIRouter, Depends

# --- Service and Model Imports ---
from ..core.deps import get_current_teacher
from ..models.dashboard_model import DashboardSummary
from ..models.teacher_model import Teacher
from ..services import dashboard_service
from ..services.roster_store import RosterStore, get_roster_store

router = APIRouter()


@router.get(
    "/summary",
    response_model=DashboardSummary,
    summary="Get Dashboard Summary",
    description="Retrieves the statistics cards and recent students for the overview tab."
)
def get_dashboard_summary(
    store: RosterStore = Depends(get_roster_store),
    teacher: Teacher = Depends(get_current_teacher)
):
    return dashboard_service.get_summary_data(store=store, teacher_id=teacher.id)
