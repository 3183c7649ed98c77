"""
API Router Aggregator.

Combines all v1 API routers into a single router for the main app.
"""

from fastapi import APIRouter

from app.api.v1 import auth, profile, projects, candidate, company, admin

api_router = APIRouter()

# Include all v1 routers with their prefixes and tags
api_router.include_router(
    auth.router,
    prefix="/auth",
    tags=["Authentication"],
)

api_router.include_router(
    profile.router,
    prefix="/profile",
    tags=["Profile"],
)

api_router.include_router(
    projects.router,
    prefix="/projects",
    tags=["Projects"],
)

api_router.include_router(
    candidate.router,
    prefix="/candidate",
    tags=["Candidate"],
)

api_router.include_router(
    company.router,
    prefix="/company",
    tags=["Company"],
)

api_router.include_router(
    admin.router,
    prefix="/admin",
    tags=["Admin"],
)
