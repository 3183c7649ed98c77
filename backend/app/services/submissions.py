import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.context import RequestContext
from app.core.errors import DuplicateSubmission, NotFound
from app.crud import projects as project_crud
from app.crud import submissions as submission_crud
from app.db.session import unit_of_work
from app.models import Submission
from app.services.projects import ensure_accepting_submissions

logger = logging.getLogger("submissions")


def submit_work(
    db: Session,
    ctx: RequestContext,
    project_id: int,
    content: str,
    attachment_url: Optional[str] = None,
) -> Submission:
    """
    Create the caller's submission for an active project.

    The pre-check gives a friendly error in the common case; the unique
    constraint on (project_id, candidate_id) decides concurrent attempts.
    """
    project = project_crud.get_project(db, project_id)
    if project is None:
        raise NotFound("Project not found")
    ensure_accepting_submissions(db, project)

    if submission_crud.get_submission_by_project_and_candidate(db, project_id, ctx.user_id):
        raise DuplicateSubmission()

    try:
        with unit_of_work(db):
            submission = submission_crud.create_submission(
                db,
                project_id=project_id,
                candidate_id=ctx.user_id,
                content=content,
                attachment_url=attachment_url,
            )
    except IntegrityError as exc:
        raise DuplicateSubmission() from exc

    db.refresh(submission)
    logger.info(f"Candidate {ctx.user_id} submitted {submission.id} to project {project_id}")
    return submission


def get_my_submission(db: Session, ctx: RequestContext, project_id: int) -> Submission:
    submission = submission_crud.get_submission_by_project_and_candidate(db, project_id, ctx.user_id)
    if submission is None:
        raise NotFound("No submission found")
    return submission
