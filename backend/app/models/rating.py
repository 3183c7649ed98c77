from sqlalchemy import Column, Integer, Text, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship

from app.db.base import Base, utcnow


class Rating(Base):
    """Score a company gave an approved submission. Never updated."""

    __tablename__ = "ratings"
    __table_args__ = (
        CheckConstraint("score BETWEEN 1 AND 5", name="ck_ratings_score_range"),
    )

    id = Column(Integer, primary_key=True)
    submission_id = Column(Integer, ForeignKey("submissions.id"), unique=True, nullable=False)
    candidate_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=False, index=True)

    score = Column(Integer, nullable=False)  # 1-5
    review = Column(Text)

    created_at = Column(DateTime, default=utcnow)

    # Relationships
    submission = relationship("Submission", back_populates="rating")
