from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship

from app.db.base import Base, utcnow


class CompanyStatus:
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

    ALL = (PENDING, APPROVED, REJECTED)


class Company(Base):
    """
    Hiring company profile.

    Starts pending and is approved or rejected once by an admin. Only an
    approved company can post projects.
    """

    __tablename__ = "companies"
    __table_args__ = (
        CheckConstraint(
            "status IN ('pending', 'approved', 'rejected')",
            name="ck_companies_status",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    # One company per owning user
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False)

    name = Column(String, nullable=False)
    description = Column(Text)
    website = Column(String)
    logo_url = Column(String)
    industry = Column(String)
    size = Column(String)  # "1-10", "11-50", ...

    status = Column(String, nullable=False, default=CompanyStatus.PENDING, index=True)

    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow)

    # Relationships
    user = relationship("User", back_populates="company")
    projects = relationship("Project", back_populates="company")
