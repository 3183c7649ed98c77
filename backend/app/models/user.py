from sqlalchemy import Column, Integer, String, Text, JSON, DateTime, CheckConstraint
from sqlalchemy.orm import relationship

from app.db.base import Base, utcnow


class UserRole:
    CANDIDATE = "candidate"
    COMPANY = "company"
    ADMIN = "admin"

    ALL = (CANDIDATE, COMPANY, ADMIN)


class User(Base):
    """Marketplace account; the role decides which side of the market it is on."""

    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint(
            "role IN ('candidate', 'company', 'admin')",
            name="ck_users_role",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=True)
    first_name = Column(String)
    last_name = Column(String)
    profile_image_url = Column(String)
    role = Column(String, nullable=False, default=UserRole.CANDIDATE)

    # Candidate portfolio
    skills = Column(JSON, default=list)  # ["Python", "React"]
    experience = Column(Text)
    portfolio_url = Column(String)
    bio = Column(Text)

    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow)

    # Relationships
    company = relationship("Company", back_populates="user", uselist=False)
    submissions = relationship("Submission", back_populates="candidate")
