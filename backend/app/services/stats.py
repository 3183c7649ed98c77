"""
Read-only dashboard aggregates.

Money totals are summed as ``Decimal`` and rendered with two decimal places.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from sqlalchemy.orm import Session

from app.crud import companies as company_crud
from app.crud import payments as payment_crud
from app.crud import projects as project_crud
from app.crud import ratings as rating_crud
from app.crud import submissions as submission_crud
from app.crud import users as user_crud
from app.models import CompanyStatus, ProjectStatus, SubmissionStatus

CENTS = Decimal("0.01")


@dataclass
class AdminStats:
    total_users: int
    total_companies: int
    total_projects: int
    pending_companies: int
    pending_projects: int
    total_payouts: str


@dataclass
class CandidateStats:
    total_submissions: int
    completed_projects: int
    total_earnings: str
    average_rating: float


@dataclass
class CompanyStats:
    total_projects: int
    active_projects: int
    total_submissions: int
    total_spent: str


def format_money(amounts: Iterable[Decimal]) -> str:
    total = sum((Decimal(amount) for amount in amounts), Decimal("0"))
    return str(total.quantize(CENTS))


def admin_stats(db: Session) -> AdminStats:
    return AdminStats(
        total_users=user_crud.count_users(db),
        total_companies=company_crud.count_companies(db),
        total_projects=project_crud.count_projects(db),
        pending_companies=company_crud.count_companies(db, status=CompanyStatus.PENDING),
        pending_projects=project_crud.count_projects(db, status=ProjectStatus.PENDING),
        total_payouts=format_money(payment_crud.paid_amounts(db)),
    )


def candidate_stats(db: Session, candidate_id: int) -> CandidateStats:
    average = rating_crud.average_score(db, candidate_id)
    return CandidateStats(
        total_submissions=submission_crud.count_submissions(db, candidate_id=candidate_id),
        completed_projects=submission_crud.count_submissions(
            db, candidate_id=candidate_id, status=SubmissionStatus.APPROVED
        ),
        total_earnings=format_money(payment_crud.paid_amounts(db, candidate_id=candidate_id)),
        # No ratings yet reads as 0, not NaN
        average_rating=round(average, 2) if average is not None else 0.0,
    )


def company_stats(db: Session, company_id: int) -> CompanyStats:
    return CompanyStats(
        total_projects=project_crud.count_projects(db, company_id=company_id),
        active_projects=project_crud.count_projects(
            db, company_id=company_id, status=ProjectStatus.ACTIVE
        ),
        total_submissions=submission_crud.count_submissions(db, company_id=company_id),
        total_spent=format_money(payment_crud.paid_amounts(db, company_id=company_id)),
    )
