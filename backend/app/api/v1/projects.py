"""
Project listing and submission endpoints.

Listings are public; submitting and reading one's own submission require an
authenticated caller.
"""

from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import Field
from sqlalchemy.orm import Session

from app.api.schemas import APIModel, ProjectWithCompany, SubmissionResponse
from app.api.v1.auth import get_request_context
from app.core.config import settings
from app.core.context import RequestContext
from app.db.session import get_db
from app.services import get_my_submission, get_public_project, list_active_projects, submit_work

router = APIRouter()


class SubmissionCreate(APIModel):
    content: str = Field(min_length=1)
    attachment_url: Optional[str] = None


@router.get("", response_model=list[ProjectWithCompany])
def list_projects(db: Session = Depends(get_db)):
    """All active projects, newest first."""
    return list_active_projects(db)


@router.get("/featured", response_model=list[ProjectWithCompany])
def featured_projects(
    ctx: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db),
):
    return list_active_projects(db, limit=settings.FEATURED_PROJECT_LIMIT)


@router.get("/{project_id}", response_model=ProjectWithCompany)
def get_project(project_id: int, db: Session = Depends(get_db)):
    return get_public_project(db, project_id)


@router.get("/{project_id}/my-submission", response_model=SubmissionResponse)
def my_submission(
    project_id: int,
    ctx: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db),
):
    return get_my_submission(db, ctx, project_id)


@router.post(
    "/{project_id}/submissions",
    response_model=SubmissionResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_submission(
    project_id: int,
    payload: SubmissionCreate,
    ctx: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db),
):
    """
    Submit work to an active project.

    Fails with 409 when the project is not open or the caller has already
    submitted to it.
    """
    return submit_work(
        db,
        ctx,
        project_id=project_id,
        content=payload.content,
        attachment_url=payload.attachment_url,
    )
