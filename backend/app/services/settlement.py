"""
Submission review and settlement.

Reviewing a submission is the one operation that writes three tables: the
submission's status, an optional rating and, on approval, a payment. All of
it happens in one unit of work.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from app.core.context import RequestContext
from app.core.errors import NotFound, SubmissionAlreadyReviewed, ValidationError
from app.crud import payments as payment_crud
from app.crud import ratings as rating_crud
from app.crud import submissions as submission_crud
from app.db.base import utcnow
from app.db.session import unit_of_work
from app.models import PaymentStatus, Submission, SubmissionStatus
from app.services.ownership import ensure_company_owns, get_owned_company

logger = logging.getLogger("settlement")


def review_submission(
    db: Session,
    ctx: RequestContext,
    submission_id: int,
    approved: bool,
    rating: Optional[int] = None,
    feedback: Optional[str] = None,
) -> Submission:
    """
    Approve or reject a submission on behalf of the owning company.

    Approval records the rating (when given) and a paid payment equal to the
    project's payment. A submission can be reviewed once; later attempts
    raise SubmissionAlreadyReviewed and change nothing.
    """
    company = get_owned_company(db, ctx)

    submission = submission_crud.get_submission(db, submission_id)
    if submission is None:
        raise NotFound("Submission not found")

    project = submission.project
    ensure_company_owns(company, project, "Not authorized to review this submission")

    if rating is not None and not 1 <= rating <= 5:
        raise ValidationError("Rating must be between 1 and 5")

    new_status = SubmissionStatus.APPROVED if approved else SubmissionStatus.REJECTED

    with unit_of_work(db):
        # Status guard and transition in one statement
        if not submission_crud.transition_submission_status(
            db,
            submission.id,
            SubmissionStatus.REVIEWABLE,
            new_status,
            feedback=feedback,
        ):
            raise SubmissionAlreadyReviewed()

        if approved:
            if rating is not None:
                rating_crud.create_rating(
                    db,
                    submission_id=submission.id,
                    candidate_id=submission.candidate_id,
                    company_id=company.id,
                    score=rating,
                    review=feedback,
                )
            payment_crud.create_payment(
                db,
                submission_id=submission.id,
                candidate_id=submission.candidate_id,
                company_id=company.id,
                amount=project.payment,
                status=PaymentStatus.PAID,
                paid_at=utcnow(),
            )

    db.refresh(submission)
    if approved:
        logger.info(
            f"Submission {submission.id} approved by company {company.id}; "
            f"paid {project.payment} to candidate {submission.candidate_id}"
        )
    else:
        logger.info(f"Submission {submission.id} rejected by company {company.id}")
    return submission
