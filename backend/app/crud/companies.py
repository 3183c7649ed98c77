from typing import Optional

from sqlalchemy.orm import Session, joinedload

from app.db.base import utcnow
from app.models import Company, CompanyStatus


def get_company(db: Session, company_id: int) -> Optional[Company]:
    return db.query(Company).filter(Company.id == company_id).first()


def get_company_by_user_id(db: Session, user_id: int) -> Optional[Company]:
    return db.query(Company).filter(Company.user_id == user_id).first()


def get_companies_by_status(db: Session, status: str) -> list[Company]:
    return (
        db.query(Company)
        .options(joinedload(Company.user))
        .filter(Company.status == status)
        .order_by(Company.created_at.desc(), Company.id.desc())
        .all()
    )


def get_all_companies(db: Session) -> list[Company]:
    return (
        db.query(Company)
        .options(joinedload(Company.user))
        .order_by(Company.created_at.desc(), Company.id.desc())
        .all()
    )


def create_company(db: Session, user_id: int, name: str, **fields) -> Company:
    company = Company(user_id=user_id, name=name, status=CompanyStatus.PENDING, **fields)
    db.add(company)
    db.flush()
    return company


def transition_company_status(db: Session, company_id: int, from_status: str, to_status: str) -> bool:
    """
    Move a company from one status to another in a single UPDATE.

    Returns False when no row was in ``from_status``, which leaves the
    company untouched.
    """
    updated = (
        db.query(Company)
        .filter(Company.id == company_id, Company.status == from_status)
        .update(
            {Company.status: to_status, Company.updated_at: utcnow()},
            synchronize_session=False,
        )
    )
    return updated == 1


def count_companies(db: Session, status: Optional[str] = None) -> int:
    query = db.query(Company)
    if status is not None:
        query = query.filter(Company.status == status)
    return query.count()
