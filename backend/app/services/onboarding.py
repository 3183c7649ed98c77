"""
Company onboarding and account profile.

A user becomes a company by creating its (single) company profile, which
starts pending until an admin approves or rejects it.
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.context import RequestContext
from app.core.errors import DuplicateCompany, NotFound, ReviewAlreadyRecorded
from app.crud import companies as company_crud
from app.crud import users as user_crud
from app.db.session import unit_of_work
from app.models import Company, CompanyStatus, User, UserRole

logger = logging.getLogger("onboarding")

PROFILE_FIELDS = ("first_name", "last_name", "bio", "skills", "experience", "portfolio_url")


def update_profile(db: Session, ctx: RequestContext, **updates) -> User:
    """Update the caller's own profile. Unknown fields (role included) are ignored."""
    changes = {k: v for k, v in updates.items() if k in PROFILE_FIELDS}
    with unit_of_work(db):
        user_crud.update_user(db, ctx.user, **changes)
    db.refresh(ctx.user)
    return ctx.user


def create_company(db: Session, ctx: RequestContext, name: str, **fields) -> Company:
    """
    Create the caller's company profile and flip a candidate's role to company.

    Both writes share one transaction: either the company row exists and the
    role is flipped, or neither change is kept.
    """
    if company_crud.get_company_by_user_id(db, ctx.user_id) is not None:
        raise DuplicateCompany()

    try:
        with unit_of_work(db):
            if ctx.user.role == UserRole.CANDIDATE:
                user_crud.update_user(db, ctx.user, role=UserRole.COMPANY)
            company = company_crud.create_company(db, ctx.user_id, name, **fields)
    except IntegrityError as exc:
        # Lost a race against a concurrent creation for the same user
        raise DuplicateCompany() from exc

    db.refresh(company)
    logger.info(f"User {ctx.user_id} created company {company.id} ({company.name})")
    return company


def review_company(db: Session, company_id: int, approved: bool) -> Company:
    """Admin decision on a pending company. One-shot: pending -> approved | rejected."""
    company = company_crud.get_company(db, company_id)
    if company is None:
        raise NotFound("Company not found")

    new_status = CompanyStatus.APPROVED if approved else CompanyStatus.REJECTED
    with unit_of_work(db):
        if not company_crud.transition_company_status(
            db, company_id, CompanyStatus.PENDING, new_status
        ):
            raise ReviewAlreadyRecorded(f"Company has already been {company.status}")

    db.refresh(company)
    logger.info(f"Company {company_id} reviewed: {new_status}")
    return company
