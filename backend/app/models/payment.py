from sqlalchemy import Column, Integer, String, Numeric, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from app.db.base import Base, utcnow


class PaymentStatus:
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"

    ALL = (PENDING, PAID, FAILED)


class Payment(Base):
    """
    Settlement ledger row for an approved submission.

    No gateway is involved: a payment is recorded as paid at the moment the
    submission is approved. Rows are append-only.
    """

    __tablename__ = "payments"

    id = Column(Integer, primary_key=True)
    submission_id = Column(Integer, ForeignKey("submissions.id"), unique=True, nullable=False)
    candidate_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=False, index=True)

    amount = Column(Numeric(10, 2), nullable=False)
    status = Column(String, nullable=False, default=PaymentStatus.PENDING)
    paid_at = Column(DateTime)

    created_at = Column(DateTime, default=utcnow, index=True)

    # Relationships
    submission = relationship("Submission", back_populates="payment")
    candidate = relationship("User", foreign_keys=[candidate_id])
    company = relationship("Company", foreign_keys=[company_id])
