from typing import Iterable, Optional

from sqlalchemy.orm import Session, joinedload

from app.db.base import utcnow
from app.models import Project, Submission, SubmissionStatus


def get_submission(db: Session, submission_id: int) -> Optional[Submission]:
    return (
        db.query(Submission)
        .options(joinedload(Submission.project))
        .filter(Submission.id == submission_id)
        .first()
    )


def get_submission_by_project_and_candidate(
    db: Session, project_id: int, candidate_id: int
) -> Optional[Submission]:
    return (
        db.query(Submission)
        .filter(Submission.project_id == project_id, Submission.candidate_id == candidate_id)
        .first()
    )


def get_submissions_by_candidate(
    db: Session, candidate_id: int, status: Optional[str] = None
) -> list[Submission]:
    """Candidate submissions with project, company and rating loaded for display."""
    query = (
        db.query(Submission)
        .options(
            joinedload(Submission.project).joinedload(Project.company),
            joinedload(Submission.rating),
        )
        .filter(Submission.candidate_id == candidate_id)
    )
    if status is not None:
        query = query.filter(Submission.status == status)
    return query.order_by(Submission.created_at.desc(), Submission.id.desc()).all()


def create_submission(
    db: Session,
    project_id: int,
    candidate_id: int,
    content: str,
    attachment_url: Optional[str] = None,
) -> Submission:
    submission = Submission(
        project_id=project_id,
        candidate_id=candidate_id,
        content=content,
        attachment_url=attachment_url,
        status=SubmissionStatus.PENDING,
    )
    db.add(submission)
    db.flush()
    return submission


def transition_submission_status(
    db: Session,
    submission_id: int,
    from_statuses: Iterable[str],
    to_status: str,
    feedback: Optional[str] = None,
) -> bool:
    """
    Compare-and-swap the submission status.

    Only a row currently in one of ``from_statuses`` is updated. Returns
    whether exactly one row changed.
    """
    updated = (
        db.query(Submission)
        .filter(Submission.id == submission_id, Submission.status.in_(list(from_statuses)))
        .update(
            {
                Submission.status: to_status,
                Submission.feedback: feedback,
                Submission.updated_at: utcnow(),
            },
            synchronize_session=False,
        )
    )
    return updated == 1


def count_submissions(
    db: Session,
    candidate_id: Optional[int] = None,
    project_id: Optional[int] = None,
    company_id: Optional[int] = None,
    status: Optional[str] = None,
    statuses: Optional[tuple] = None,
) -> int:
    query = db.query(Submission)
    if candidate_id is not None:
        query = query.filter(Submission.candidate_id == candidate_id)
    if project_id is not None:
        query = query.filter(Submission.project_id == project_id)
    if company_id is not None:
        query = query.join(Project, Submission.project_id == Project.id).filter(
            Project.company_id == company_id
        )
    if status is not None:
        query = query.filter(Submission.status == status)
    if statuses is not None:
        query = query.filter(Submission.status.in_(statuses))
    return query.count()
