from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.schemas import CandidateStatsResponse, CandidateSubmission, CompletedSubmission
from app.api.v1.auth import get_request_context
from app.core.context import RequestContext
from app.crud import submissions as submission_crud
from app.db.session import get_db
from app.models import SubmissionStatus
from app.services import candidate_stats

router = APIRouter()


@router.get("/submissions", response_model=list[CandidateSubmission])
def list_my_submissions(
    ctx: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db),
):
    """Caller's submissions with the project and company name."""
    return submission_crud.get_submissions_by_candidate(db, ctx.user_id)


@router.get("/submissions/completed", response_model=list[CompletedSubmission])
def list_completed_submissions(
    ctx: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db),
):
    """Approved submissions with their rating, for the candidate's portfolio."""
    return submission_crud.get_submissions_by_candidate(
        db, ctx.user_id, status=SubmissionStatus.APPROVED
    )


@router.get("/stats", response_model=CandidateStatsResponse)
def get_candidate_stats(
    ctx: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db),
):
    return candidate_stats(db, ctx.user_id)
