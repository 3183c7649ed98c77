from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session, joinedload

from app.models import Payment, PaymentStatus


def create_payment(
    db: Session,
    submission_id: int,
    candidate_id: int,
    company_id: int,
    amount: Decimal,
    status: str = PaymentStatus.PENDING,
    paid_at: Optional[datetime] = None,
) -> Payment:
    payment = Payment(
        submission_id=submission_id,
        candidate_id=candidate_id,
        company_id=company_id,
        amount=amount,
        status=status,
        paid_at=paid_at,
    )
    db.add(payment)
    db.flush()
    return payment


def get_recent_payments(db: Session, limit: int) -> list[Payment]:
    return (
        db.query(Payment)
        .options(joinedload(Payment.candidate), joinedload(Payment.company))
        .order_by(Payment.created_at.desc(), Payment.id.desc())
        .limit(limit)
        .all()
    )


def paid_amounts(
    db: Session, candidate_id: Optional[int] = None, company_id: Optional[int] = None
) -> list[Decimal]:
    """
    Amounts of settled payments, optionally scoped to a candidate or company.

    Summing happens in Python over ``Decimal`` values so the total is exact
    regardless of how the backend aggregates numerics.
    """
    query = db.query(Payment.amount).filter(Payment.status == PaymentStatus.PAID)
    if candidate_id is not None:
        query = query.filter(Payment.candidate_id == candidate_id)
    if company_id is not None:
        query = query.filter(Payment.company_id == company_id)
    return [amount for (amount,) in query.all()]
