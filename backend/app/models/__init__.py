from app.models.user import User, UserRole
from app.models.company import Company, CompanyStatus
from app.models.project import Project, ProjectStatus, DIFFICULTIES
from app.models.submission import Submission, SubmissionStatus
from app.models.rating import Rating
from app.models.payment import Payment, PaymentStatus

__all__ = [
    "User",
    "UserRole",
    "Company",
    "CompanyStatus",
    "Project",
    "ProjectStatus",
    "DIFFICULTIES",
    "Submission",
    "SubmissionStatus",
    "Rating",
    "Payment",
    "PaymentStatus",
]
