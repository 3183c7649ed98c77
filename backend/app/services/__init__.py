from app.services.ownership import get_owned_company, ensure_company_owns
from app.services.onboarding import create_company, review_company, update_profile
from app.services.projects import (
    create_project,
    review_project,
    get_public_project,
    list_active_projects,
    ensure_accepting_submissions,
)
from app.services.submissions import submit_work, get_my_submission
from app.services.settlement import review_submission
from app.services.stats import admin_stats, candidate_stats, company_stats

__all__ = [
    "get_owned_company",
    "ensure_company_owns",
    "create_company",
    "review_company",
    "update_profile",
    "create_project",
    "review_project",
    "get_public_project",
    "list_active_projects",
    "ensure_accepting_submissions",
    "submit_work",
    "get_my_submission",
    "review_submission",
    "admin_stats",
    "candidate_stats",
    "company_stats",
]
