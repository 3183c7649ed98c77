"""
Ownership gates.

Company-scoped resources are authorized by comparing the resource's company
id with the company the caller owns. Candidate-scoped reads need no gate because their
queries are filtered by the caller's user id.
"""

from typing import Optional

from sqlalchemy.orm import Session

from app.core.context import RequestContext
from app.core.errors import Forbidden, NotFound
from app.crud import companies as company_crud
from app.models import Company, Project


def get_owned_company(db: Session, ctx: RequestContext) -> Company:
    """Company owned by the caller; NotFound when the caller has none."""
    company = company_crud.get_company_by_user_id(db, ctx.user_id)
    if company is None:
        raise NotFound("Company not found")
    return company


def ensure_company_owns(
    company: Company,
    project: Optional[Project],
    message: str = "Not authorized to access this project",
) -> None:
    if project is None or project.company_id != company.id:
        raise Forbidden(message)

