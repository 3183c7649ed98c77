"""
Domain error taxonomy.

Every failure a handler can report is one of these. They are raised by the
services and the authorization layer and rendered to JSON by the exception
handlers registered in ``app.main``.
"""

from typing import Optional

from fastapi import status


class AppError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def code(self) -> str:
        return type(self).__name__


class Unauthenticated(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class UserNotFound(Unauthenticated):
    default_message = "User not found"


class Forbidden(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Insufficient permissions"


class CompanyNotApproved(Forbidden):
    default_message = "Company must be approved to post projects"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"


class InvalidState(AppError):
    """Action not permitted in the resource's current lifecycle state."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Action not permitted in the current state"


class ProjectNotOpen(InvalidState):
    default_message = "Project not available for submissions"


class SubmissionAlreadyReviewed(InvalidState):
    default_message = "Submission has already been reviewed"


class ReviewAlreadyRecorded(InvalidState):
    default_message = "A review decision has already been recorded"


class DuplicateResource(AppError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Resource already exists"


class DuplicateCompany(DuplicateResource):
    default_message = "You already have a company profile"


class DuplicateSubmission(DuplicateResource):
    default_message = "You have already submitted to this project"


class ValidationError(AppError):
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    default_message = "Invalid input"
