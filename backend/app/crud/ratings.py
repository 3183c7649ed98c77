from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models import Rating


def create_rating(
    db: Session,
    submission_id: int,
    candidate_id: int,
    company_id: int,
    score: int,
    review: Optional[str] = None,
) -> Rating:
    rating = Rating(
        submission_id=submission_id,
        candidate_id=candidate_id,
        company_id=company_id,
        score=score,
        review=review,
    )
    db.add(rating)
    db.flush()
    return rating


def average_score(db: Session, candidate_id: int) -> Optional[float]:
    """Mean rating score, or None when the candidate has no ratings."""
    value = db.query(func.avg(Rating.score)).filter(Rating.candidate_id == candidate_id).scalar()
    return float(value) if value is not None else None
