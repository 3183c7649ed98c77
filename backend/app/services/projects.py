"""
Project lifecycle.

Projects are created pending by approved companies and become active or
cancelled through a single admin review. Only active projects are listed
publicly and accept submissions.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from app.core.context import RequestContext
from app.core.errors import CompanyNotApproved, NotFound, ProjectNotOpen, ReviewAlreadyRecorded
from app.crud import projects as project_crud
from app.crud import submissions as submission_crud
from app.db.base import utcnow
from app.db.session import unit_of_work
from app.models import CompanyStatus, Project, ProjectStatus, SubmissionStatus
from app.services.ownership import get_owned_company

logger = logging.getLogger("projects")


def create_project(db: Session, ctx: RequestContext, **fields) -> Project:
    company = get_owned_company(db, ctx)
    if company.status != CompanyStatus.APPROVED:
        raise CompanyNotApproved()

    with unit_of_work(db):
        project = project_crud.create_project(db, company.id, **fields)

    db.refresh(project)
    logger.info(f"Company {company.id} created project {project.id} ({project.title})")
    return project


def review_project(db: Session, project_id: int, approved: bool) -> Project:
    """Admin decision on a pending project. One-shot: pending -> active | cancelled."""
    project = project_crud.get_project(db, project_id)
    if project is None:
        raise NotFound("Project not found")

    new_status = ProjectStatus.ACTIVE if approved else ProjectStatus.CANCELLED
    with unit_of_work(db):
        if not project_crud.transition_project_status(
            db, project_id, ProjectStatus.PENDING, new_status
        ):
            raise ReviewAlreadyRecorded(f"Project has already been reviewed ({project.status})")

    db.refresh(project)
    logger.info(f"Project {project_id} reviewed: {new_status}")
    return project


def get_public_project(db: Session, project_id: int) -> Project:
    project = project_crud.get_project(db, project_id)
    if project is None or project.status != ProjectStatus.ACTIVE:
        raise NotFound("Project not found")
    return project


def list_active_projects(db: Session, limit: Optional[int] = None) -> list[Project]:
    return project_crud.get_projects_by_status(db, ProjectStatus.ACTIVE, limit=limit)


def ensure_accepting_submissions(db: Session, project: Project) -> None:
    if project.status != ProjectStatus.ACTIVE:
        raise ProjectNotOpen()
    if project.deadline is not None and project.deadline < utcnow():
        raise ProjectNotOpen("Project deadline has passed")
    if project.max_submissions:
        taken = submission_crud.count_submissions(
            db, project_id=project.id, statuses=SubmissionStatus.SLOT_HOLDING
        )
        if taken >= project.max_submissions:
            raise ProjectNotOpen("Project has reached its submission limit")
