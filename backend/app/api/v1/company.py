"""
Company API endpoints.

Every route here acts on the company owned by the caller; submission review
additionally checks that the submission belongs to one of its projects.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import Field, field_validator
from sqlalchemy.orm import Session

from app.api.schemas import (
    APIModel,
    CompanyResponse,
    CompanyStatsResponse,
    ProjectResponse,
    ProjectWithSubmissions,
    SubmissionResponse,
)
from app.api.v1.auth import get_request_context
from app.core.context import RequestContext
from app.crud import projects as project_crud
from app.db.session import get_db
from app.models import DIFFICULTIES
from app.services import (
    company_stats,
    create_company,
    create_project,
    get_owned_company,
    review_submission,
)

router = APIRouter()


# ============== Pydantic Schemas ==============


class CompanyCreate(APIModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    website: Optional[str] = None
    logo_url: Optional[str] = None
    industry: Optional[str] = None
    size: Optional[str] = None


class ProjectCreate(APIModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    requirements: Optional[str] = None
    skills: list[str] = []
    payment: Decimal = Field(gt=0, max_digits=10, decimal_places=2)
    difficulty: str = "intermediate"
    deadline: Optional[datetime] = None
    max_submissions: int = Field(default=10, ge=1)

    @field_validator("difficulty")
    @classmethod
    def validate_difficulty(cls, v: str) -> str:
        v = v.lower()
        if v not in DIFFICULTIES:
            raise ValueError(f"Difficulty must be one of: {', '.join(DIFFICULTIES)}")
        return v

    @field_validator("deadline")
    @classmethod
    def normalize_deadline(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Store deadlines as naive UTC."""
        if v is not None and v.tzinfo is not None:
            v = v.astimezone(timezone.utc).replace(tzinfo=None)
        return v


class SubmissionReview(APIModel):
    approved: bool
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    feedback: Optional[str] = None


# ============== API Endpoints ==============


@router.get("/profile", response_model=CompanyResponse)
def get_company_profile(
    ctx: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db),
):
    return get_owned_company(db, ctx)


@router.post("/profile", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED)
def create_company_profile(
    payload: CompanyCreate,
    ctx: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db),
):
    """
    Create the caller's company profile.

    The company starts pending admin approval and the caller's role becomes
    'company'.
    """
    fields = payload.model_dump(exclude={"name"})
    return create_company(db, ctx, payload.name, **fields)


@router.get("/projects", response_model=list[ProjectWithSubmissions])
def list_company_projects(
    ctx: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db),
):
    """Company projects, each with its submissions and submitting candidates."""
    company = get_owned_company(db, ctx)
    return project_crud.get_projects_by_company(db, company.id)


@router.post("/projects", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
def create_company_project(
    payload: ProjectCreate,
    ctx: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db),
):
    """Post a new project. Requires an approved company; the project starts pending."""
    return create_project(db, ctx, **payload.model_dump())


@router.post("/submissions/{submission_id}/review", response_model=SubmissionResponse)
def review_company_submission(
    submission_id: int,
    payload: SubmissionReview,
    ctx: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db),
):
    """
    Approve or reject a submission to one of the caller's projects.

    Approval records the optional rating and pays the candidate the project's
    payment. A submission can only be reviewed once.
    """
    return review_submission(
        db,
        ctx,
        submission_id,
        approved=payload.approved,
        rating=payload.rating,
        feedback=payload.feedback,
    )


@router.get("/stats", response_model=CompanyStatsResponse)
def get_company_stats(
    ctx: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db),
):
    company = get_owned_company(db, ctx)
    return company_stats(db, company.id)
