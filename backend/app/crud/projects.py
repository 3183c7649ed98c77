from typing import Optional

from sqlalchemy.orm import Session, joinedload, selectinload

from app.db.base import utcnow
from app.models import Project, ProjectStatus, Submission


def get_project(db: Session, project_id: int) -> Optional[Project]:
    return (
        db.query(Project)
        .options(joinedload(Project.company))
        .filter(Project.id == project_id)
        .first()
    )


def get_projects_by_company(db: Session, company_id: int) -> list[Project]:
    """Company projects with their submissions and submitting candidates."""
    return (
        db.query(Project)
        .options(selectinload(Project.submissions).joinedload(Submission.candidate))
        .filter(Project.company_id == company_id)
        .order_by(Project.created_at.desc(), Project.id.desc())
        .all()
    )


def get_projects_by_status(db: Session, status: str, limit: Optional[int] = None) -> list[Project]:
    query = (
        db.query(Project)
        .options(joinedload(Project.company))
        .filter(Project.status == status)
        .order_by(Project.created_at.desc(), Project.id.desc())
    )
    if limit is not None:
        query = query.limit(limit)
    return query.all()


def create_project(db: Session, company_id: int, **fields) -> Project:
    project = Project(company_id=company_id, status=ProjectStatus.PENDING, **fields)
    db.add(project)
    db.flush()
    return project


def transition_project_status(db: Session, project_id: int, from_status: str, to_status: str) -> bool:
    """Conditional status UPDATE; False when the project was not in ``from_status``."""
    updated = (
        db.query(Project)
        .filter(Project.id == project_id, Project.status == from_status)
        .update(
            {Project.status: to_status, Project.updated_at: utcnow()},
            synchronize_session=False,
        )
    )
    return updated == 1


def count_projects(db: Session, company_id: Optional[int] = None, status: Optional[str] = None) -> int:
    query = db.query(Project)
    if company_id is not None:
        query = query.filter(Project.company_id == company_id)
    if status is not None:
        query = query.filter(Project.status == status)
    return query.count()
