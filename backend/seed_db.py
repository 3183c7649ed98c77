"""
TaskHire Database Seeder

Creates demo accounts and a small marketplace:
- An admin
- An approved company with one active and one pending project
- A company still awaiting approval
- A candidate with an approved, rated and paid submission
"""

import sys
sys.path.insert(0, ".")

from datetime import timedelta
from decimal import Decimal

from app.db.session import SessionLocal, engine
from app.db.base import Base, utcnow
from app.models import (
    User,
    Company,
    Project,
    Submission,
    Rating,
    Payment,
    UserRole,
    CompanyStatus,
    ProjectStatus,
    SubmissionStatus,
    PaymentStatus,
)
from app.core.security import get_password_hash


def seed_database():
    """Seed the database with demo data."""

    # Create all tables
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()

    try:
        # Check if already seeded
        existing_admin = db.query(User).filter(User.email == "admin@taskhire.dev").first()
        if existing_admin:
            print("Database already seeded. Skipping...")
            return

        print("Seeding database...")

        # 1. Admin
        admin = User(
            email="admin@taskhire.dev",
            hashed_password=get_password_hash("admin12345"),
            first_name="Ada",
            last_name="Admin",
            role=UserRole.ADMIN,
        )
        db.add(admin)

        # 2. Company owner with an approved company
        owner = User(
            email="hiring@acme.dev",
            hashed_password=get_password_hash("company123"),
            first_name="Sarah",
            last_name="Chen",
            role=UserRole.COMPANY,
        )
        db.add(owner)
        db.flush()  # Get IDs

        acme = Company(
            user_id=owner.id,
            name="Acme Labs",
            description="Product studio building tools for small businesses.",
            website="https://acme.example.com",
            industry="Software",
            size="11-50",
            status=CompanyStatus.APPROVED,
        )
        db.add(acme)
        db.flush()

        landing_page = Project(
            company_id=acme.id,
            title="Build landing page",
            description="Responsive landing page for our new scheduling product.",
            requirements="Single HTML page, mobile friendly, no frameworks required.",
            skills=["HTML", "CSS", "JavaScript"],
            payment=Decimal("250.00"),
            difficulty="beginner",
            deadline=utcnow() + timedelta(days=30),
            max_submissions=10,
            status=ProjectStatus.ACTIVE,
        )
        api_project = Project(
            company_id=acme.id,
            title="REST API for invoices",
            description="CRUD API for invoices with pagination and filtering.",
            skills=["Python", "FastAPI", "SQL"],
            payment=Decimal("600.00"),
            difficulty="advanced",
            max_submissions=5,
            status=ProjectStatus.PENDING,
        )
        db.add_all([landing_page, api_project])

        # 3. Company still waiting for approval
        pending_owner = User(
            email="founder@newco.dev",
            hashed_password=get_password_hash("company123"),
            first_name="Omar",
            last_name="Haddad",
            role=UserRole.COMPANY,
        )
        db.add(pending_owner)
        db.flush()

        db.add(
            Company(
                user_id=pending_owner.id,
                name="NewCo",
                industry="Fintech",
                size="1-10",
                status=CompanyStatus.PENDING,
            )
        )

        # 4. Candidate with a settled submission
        candidate = User(
            email="john.doe@example.com",
            hashed_password=get_password_hash("candidate123"),
            first_name="John",
            last_name="Doe",
            role=UserRole.CANDIDATE,
            skills=["HTML", "CSS", "React"],
            bio="Frontend developer looking for real-world projects.",
            portfolio_url="https://github.com/johndoe",
        )
        db.add(candidate)
        db.flush()

        submission = Submission(
            project_id=landing_page.id,
            candidate_id=candidate.id,
            content="Landing page delivered; see repository for source.",
            attachment_url="https://github.com/johndoe/acme-landing",
            status=SubmissionStatus.APPROVED,
            feedback="Clean and fast, great work.",
        )
        db.add(submission)
        db.flush()

        db.add(
            Rating(
                submission_id=submission.id,
                candidate_id=candidate.id,
                company_id=acme.id,
                score=5,
                review="Clean and fast, great work.",
            )
        )
        db.add(
            Payment(
                submission_id=submission.id,
                candidate_id=candidate.id,
                company_id=acme.id,
                amount=landing_page.payment,
                status=PaymentStatus.PAID,
                paid_at=utcnow(),
            )
        )

        # Commit all changes
        db.commit()

        print("✅ Database seeded successfully!")
        print("\n📋 Created Users:")
        print("   - admin@taskhire.dev (password: admin12345) [ADMIN]")
        print("   - hiring@acme.dev (password: company123) [Acme Labs, approved]")
        print("   - founder@newco.dev (password: company123) [NewCo, pending]")
        print("   - john.doe@example.com (password: candidate123) [CANDIDATE]")

    except Exception as e:
        db.rollback()
        print(f"❌ Error seeding database: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_database()
