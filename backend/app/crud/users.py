from typing import Optional

from sqlalchemy.orm import Session

from app.db.base import utcnow
from app.models import User, UserRole


def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    """Get a user by email address."""
    return db.query(User).filter(User.email == email).first()


def create_user(
    db: Session,
    email: str,
    hashed_password: Optional[str] = None,
    role: str = UserRole.CANDIDATE,
    **fields,
) -> User:
    user = User(email=email, hashed_password=hashed_password, role=role, **fields)
    db.add(user)
    db.flush()
    return user


def update_user(db: Session, user: User, **updates) -> User:
    """Apply field updates and bump ``updated_at``."""
    for field, value in updates.items():
        setattr(user, field, value)
    user.updated_at = utcnow()
    db.flush()
    return user


def count_users(db: Session) -> int:
    return db.query(User).count()
