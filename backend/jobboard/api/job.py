from fastapi import APIRouter

from ..models.job import Job
from ..services.job_listings import list_jobs

router = APIRouter(prefix="/jobs", tags=["Jobs"])


@router.get("", response_model=list[Job])
def get_jobs():
    """Return every job posting. Query parameters are ignored."""
    return list_jobs()
