"""
Admin API endpoints.

Gatekeeping for the marketplace: approving companies and projects, plus
platform-wide stats and recent payouts. Every route requires the admin role.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.api.schemas import (
    AdminStatsResponse,
    CompanyResponse,
    CompanyWithUser,
    PaymentWithParties,
    ProjectResponse,
    ProjectWithCompany,
    ReviewDecision,
)
from app.api.v1.auth import require_role
from app.core.config import settings
from app.core.context import RequestContext
from app.crud import companies as company_crud
from app.crud import payments as payment_crud
from app.crud import projects as project_crud
from app.db.session import get_db
from app.models import CompanyStatus, ProjectStatus, UserRole
from app.services import admin_stats, review_company, review_project

router = APIRouter()

require_admin = require_role(UserRole.ADMIN)


@router.get("/stats", response_model=AdminStatsResponse)
def get_admin_stats(
    ctx: RequestContext = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return admin_stats(db)


@router.get("/companies", response_model=list[CompanyWithUser])
def list_companies(
    ctx: RequestContext = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return company_crud.get_all_companies(db)


@router.get("/companies/pending", response_model=list[CompanyWithUser])
def list_pending_companies(
    ctx: RequestContext = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return company_crud.get_companies_by_status(db, CompanyStatus.PENDING)


@router.post("/companies/{company_id}/review", response_model=CompanyResponse)
def review_pending_company(
    company_id: int,
    decision: ReviewDecision,
    ctx: RequestContext = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Approve or reject a pending company. A company is reviewed once."""
    return review_company(db, company_id, decision.approved)


@router.get("/projects/pending", response_model=list[ProjectWithCompany])
def list_pending_projects(
    ctx: RequestContext = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return project_crud.get_projects_by_status(db, ProjectStatus.PENDING)


@router.post("/projects/{project_id}/review", response_model=ProjectResponse)
def review_pending_project(
    project_id: int,
    decision: ReviewDecision,
    ctx: RequestContext = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Activate or cancel a pending project."""
    return review_project(db, project_id, decision.approved)


@router.get("/payments/recent", response_model=list[PaymentWithParties])
def recent_payments(
    limit: Optional[int] = Query(default=None, ge=1, le=100),
    ctx: RequestContext = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return payment_crud.get_recent_payments(db, limit or settings.RECENT_PAYMENT_LIMIT)
