from sqlalchemy import (
    Column, Integer, String, Text, JSON, Numeric, DateTime, ForeignKey, CheckConstraint,
)
from sqlalchemy.orm import relationship

from app.db.base import Base, utcnow


class ProjectStatus:
    PENDING = "pending"
    APPROVED = "approved"
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    ALL = (PENDING, APPROVED, ACTIVE, COMPLETED, CANCELLED)


DIFFICULTIES = ("beginner", "intermediate", "advanced")


class Project(Base):
    """Paid micro-project posted by a company."""

    __tablename__ = "projects"
    __table_args__ = (
        CheckConstraint(
            "status IN ('pending', 'approved', 'active', 'completed', 'cancelled')",
            name="ck_projects_status",
        ),
        CheckConstraint("payment > 0", name="ck_projects_payment_positive"),
    )

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=False, index=True)

    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    requirements = Column(Text)
    skills = Column(JSON, default=list)

    payment = Column(Numeric(10, 2), nullable=False)
    difficulty = Column(String, default="intermediate")
    deadline = Column(DateTime, nullable=True)
    max_submissions = Column(Integer, default=10)

    status = Column(String, nullable=False, default=ProjectStatus.PENDING, index=True)

    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow)

    # Relationships
    company = relationship("Company", back_populates="projects")
    submissions = relationship(
        "Submission",
        back_populates="project",
        order_by="Submission.id.desc()",
    )
