"""
Response schemas shared across routers.

JSON bodies use camelCase keys; snake_case is accepted on input as well.
Nested models join related rows for display (a project with its company, a
submission with its candidate, ...).
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class APIModel(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class UserResponse(APIModel):
    """Public user record (never includes the password hash)."""

    id: int
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    role: str
    skills: Optional[list[str]] = None
    experience: Optional[str] = None
    portfolio_url: Optional[str] = None
    bio: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CompanyResponse(APIModel):
    id: int
    user_id: int
    name: str
    description: Optional[str] = None
    website: Optional[str] = None
    logo_url: Optional[str] = None
    industry: Optional[str] = None
    size: Optional[str] = None
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CompanyWithUser(CompanyResponse):
    user: Optional[UserResponse] = None


class CompanyName(APIModel):
    name: str


class ProjectResponse(APIModel):
    id: int
    company_id: int
    title: str
    description: str
    requirements: Optional[str] = None
    skills: Optional[list[str]] = None
    payment: Decimal
    difficulty: Optional[str] = None
    deadline: Optional[datetime] = None
    max_submissions: Optional[int] = None
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProjectWithCompany(ProjectResponse):
    company: Optional[CompanyResponse] = None


class ProjectWithCompanyName(ProjectResponse):
    company: Optional[CompanyName] = None


class RatingResponse(APIModel):
    id: int
    submission_id: int
    candidate_id: int
    company_id: int
    score: int
    review: Optional[str] = None
    created_at: Optional[datetime] = None


class SubmissionResponse(APIModel):
    id: int
    project_id: int
    candidate_id: int
    content: str
    attachment_url: Optional[str] = None
    status: str
    feedback: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class SubmissionWithCandidate(SubmissionResponse):
    candidate: Optional[UserResponse] = None


class ProjectWithSubmissions(ProjectResponse):
    submissions: list[SubmissionWithCandidate] = []


class CandidateSubmission(SubmissionResponse):
    project: Optional[ProjectWithCompanyName] = None


class CompletedSubmission(CandidateSubmission):
    rating: Optional[RatingResponse] = None


class PaymentResponse(APIModel):
    id: int
    submission_id: int
    candidate_id: int
    company_id: int
    amount: Decimal
    status: str
    paid_at: Optional[datetime] = None
    created_at: Optional[datetime] = None


class PaymentWithParties(PaymentResponse):
    candidate: Optional[UserResponse] = None
    company: Optional[CompanyResponse] = None


class ReviewDecision(APIModel):
    """Admin approve/reject decision for a company or project."""

    approved: bool


class AdminStatsResponse(APIModel):
    total_users: int
    total_companies: int
    total_projects: int
    pending_companies: int
    pending_projects: int
    total_payouts: str


class CandidateStatsResponse(APIModel):
    total_submissions: int
    completed_projects: int
    total_earnings: str
    average_rating: float


class CompanyStatsResponse(APIModel):
    total_projects: int
    active_projects: int
    total_submissions: int
    total_spent: str
