"""
Authentication API endpoints and identity resolution.

Handles registration and login with JWT token generation, and provides the
dependencies that turn a bearer token into a RequestContext and gate routes
by role.
"""

import logging
import re
from typing import Callable, Optional

from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordBearer, OAuth2PasswordRequestForm
from pydantic import BaseModel, Field, field_validator
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.api.schemas import APIModel, UserResponse
from app.core.context import RequestContext
from app.core.errors import DuplicateResource, Forbidden, Unauthenticated, UserNotFound
from app.core.security import (
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)
from app.crud import users as user_crud
from app.db.session import get_db, unit_of_work
from app.models import User, UserRole

logger = logging.getLogger("auth")

router = APIRouter()

# Missing tokens are reported by get_request_context, not by the scheme
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)


# ============== Pydantic Schemas ==============


class UserRegister(APIModel):
    """Schema for user registration. New accounts are always candidates."""

    email: str
    password: str = Field(min_length=8)
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate email format."""
        email_pattern = r"^[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9-.]+$"
        if not re.match(email_pattern, v):
            raise ValueError("Invalid email format")
        return v.lower()


class Token(BaseModel):
    """Schema for JWT token response."""

    access_token: str
    token_type: str = "bearer"


# ============== Identity & Role Gate ==============


def authenticate_user(db: Session, email: str, password: str) -> Optional[User]:
    """Authenticate a user by email and password."""
    user = user_crud.get_user_by_email(db, email.lower())
    if not user:
        return None
    if not verify_password(password, user.hashed_password):
        return None
    return user


def get_request_context(
    token: Optional[str] = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> RequestContext:
    """
    Resolve the caller into a RequestContext.

    The persisted user is loaded once here and travels with the context, so
    role checks and handlers never look it up again.
    """
    if not token:
        raise Unauthenticated()

    payload = decode_access_token(token)
    if payload is None:
        raise Unauthenticated("Could not validate credentials")

    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        raise Unauthenticated("Could not validate credentials")

    user = user_crud.get_user(db, user_id)
    if user is None:
        raise UserNotFound()

    return RequestContext(user=user, claims=payload)


def require_role(*allowed_roles: str) -> Callable[..., RequestContext]:
    """Dependency factory admitting only callers whose persisted role is allowed."""

    def role_gate(ctx: RequestContext = Depends(get_request_context)) -> RequestContext:
        if ctx.role not in allowed_roles:
            logger.warning(f"User {ctx.user_id} ({ctx.role}) denied; requires {allowed_roles}")
            raise Forbidden()
        return ctx

    return role_gate


# ============== API Endpoints ==============


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(user_data: UserRegister, db: Session = Depends(get_db)):
    """Register a new candidate account."""
    if user_crud.get_user_by_email(db, user_data.email):
        raise DuplicateResource("Email already registered")

    try:
        with unit_of_work(db):
            user = user_crud.create_user(
                db,
                email=user_data.email,
                hashed_password=get_password_hash(user_data.password),
                role=UserRole.CANDIDATE,
                first_name=user_data.first_name,
                last_name=user_data.last_name,
            )
    except IntegrityError as exc:
        raise DuplicateResource("Email already registered") from exc

    db.refresh(user)
    logger.info(f"Registered user {user.id}")
    return user


@router.post("/login", response_model=Token)
def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db),
):
    """
    Login and get JWT access token.

    Uses OAuth2 password flow. Send username (email) and password
    as form data.
    """
    user = authenticate_user(db, form_data.username, form_data.password)
    if not user:
        raise Unauthenticated("Incorrect email or password")

    return Token(access_token=create_access_token(user.id, role=user.role))


@router.get("/user", response_model=UserResponse)
def get_current_user(ctx: RequestContext = Depends(get_request_context)):
    """Get the current authenticated user record."""
    return ctx.user
