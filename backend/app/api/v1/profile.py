from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.schemas import APIModel, UserResponse
from app.api.v1.auth import get_request_context
from app.core.context import RequestContext
from app.db.session import get_db
from app.services import update_profile

router = APIRouter()


class ProfileUpdate(APIModel):
    """Editable profile fields. Omitted fields are left unchanged."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    bio: Optional[str] = None
    skills: Optional[list[str]] = None
    experience: Optional[str] = None
    portfolio_url: Optional[str] = None


@router.patch("", response_model=UserResponse)
def patch_profile(
    updates: ProfileUpdate,
    ctx: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db),
):
    return update_profile(db, ctx, **updates.model_dump(exclude_unset=True))
