from sqlalchemy import (
    Column, Integer, String, Text, DateTime, ForeignKey, CheckConstraint, UniqueConstraint,
)
from sqlalchemy.orm import relationship

from app.db.base import Base, utcnow


class SubmissionStatus:
    PENDING = "pending"
    UNDER_REVIEW = "under_review"
    APPROVED = "approved"
    REJECTED = "rejected"

    ALL = (PENDING, UNDER_REVIEW, APPROVED, REJECTED)
    # States a company review may move out of
    REVIEWABLE = (PENDING, UNDER_REVIEW)
    # States that hold one of a project's max_submissions slots
    SLOT_HOLDING = (PENDING, UNDER_REVIEW, APPROVED)


class Submission(Base):
    """A candidate's work for a project. One per candidate and project."""

    __tablename__ = "submissions"
    __table_args__ = (
        UniqueConstraint(
            "project_id",
            "candidate_id",
            name="uq_submissions_project_candidate",
        ),
        CheckConstraint(
            "status IN ('pending', 'under_review', 'approved', 'rejected')",
            name="ck_submissions_status",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False, index=True)
    candidate_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    content = Column(Text, nullable=False)
    attachment_url = Column(String)

    status = Column(String, nullable=False, default=SubmissionStatus.PENDING)
    feedback = Column(Text)

    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow)

    # Relationships
    project = relationship("Project", back_populates="submissions")
    candidate = relationship("User", back_populates="submissions")
    rating = relationship("Rating", back_populates="submission", uselist=False)
    payment = relationship("Payment", back_populates="submission", uselist=False)
