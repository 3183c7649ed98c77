from decimal import Decimal

from app.db.base import utcnow
from app.models import (
    CompanyStatus,
    Payment,
    PaymentStatus,
    ProjectStatus,
    Rating,
    SubmissionStatus,
    User,
    UserRole,
)
from app.services import candidate_stats, company_stats
from app.services.stats import format_money

from tests.factories import auth_headers, make_company, make_project, make_submission, make_user


def _pay(db, submission, company, amount, status=PaymentStatus.PAID):
    db.add(
        Payment(
            submission_id=submission.id,
            candidate_id=submission.candidate_id,
            company_id=company.id,
            amount=Decimal(amount),
            status=status,
            paid_at=utcnow() if status == PaymentStatus.PAID else None,
        )
    )
    db.commit()


def test_candidate_without_activity(client, db):
    candidate = make_user(db)

    response = client.get("/api/candidate/stats", headers=auth_headers(candidate))

    assert response.status_code == 200
    assert response.json() == {
        "totalSubmissions": 0,
        "completedProjects": 0,
        "totalEarnings": "0.00",
        "averageRating": 0,
    }


def test_candidate_stats_aggregate(db):
    company = make_company(db)
    candidate = make_user(db)
    approved = [
        make_submission(db, make_project(db, company=company), candidate=candidate, status=SubmissionStatus.APPROVED)
        for _ in range(2)
    ]
    make_submission(db, make_project(db, company=company), candidate=candidate)
    for submission, score in zip(approved, (4, 5)):
        db.add(Rating(submission_id=submission.id, candidate_id=candidate.id, company_id=company.id, score=score))
    _pay(db, approved[0], company, "250.00")
    _pay(db, approved[1], company, "120.50")

    stats = candidate_stats(db, candidate.id)

    assert stats.total_submissions == 3
    assert stats.completed_projects == 2
    assert stats.total_earnings == "370.50"
    assert stats.average_rating == 4.5


def test_unpaid_payments_are_not_counted(db):
    company = make_company(db)
    candidate = make_user(db)
    submission = make_submission(db, make_project(db, company=company), candidate=candidate)
    _pay(db, submission, company, "80.00", status=PaymentStatus.FAILED)

    assert candidate_stats(db, candidate.id).total_earnings == "0.00"
    assert company_stats(db, company.id).total_spent == "0.00"


def test_money_totals_are_exact():
    assert format_money([Decimal("0.10")] * 3) == "0.30"
    assert format_money([]) == "0.00"


def test_company_stats(client, db):
    company = make_company(db)
    active = make_project(db, company=company, status=ProjectStatus.ACTIVE)
    make_project(db, company=company, status=ProjectStatus.PENDING)
    first = make_submission(db, active, status=SubmissionStatus.APPROVED)
    make_submission(db, active)
    _pay(db, first, company, "250.00")

    other = make_company(db)
    make_submission(db, make_project(db, company=other))

    response = client.get("/api/company/stats", headers=auth_headers(db.get(User, company.user_id)))

    assert response.status_code == 200
    assert response.json() == {
        "totalProjects": 2,
        "activeProjects": 1,
        "totalSubmissions": 2,
        "totalSpent": "250.00",
    }


def test_admin_stats(client, db):
    admin = make_user(db, role=UserRole.ADMIN)
    approved = make_company(db, status=CompanyStatus.APPROVED)
    make_company(db, status=CompanyStatus.PENDING)
    project = make_project(db, company=approved)
    make_project(db, company=approved, status=ProjectStatus.PENDING)
    submission = make_submission(db, project, status=SubmissionStatus.APPROVED)
    _pay(db, submission, approved, "250.00")

    response = client.get("/api/admin/stats", headers=auth_headers(admin))

    assert response.status_code == 200
    # admin + two company owners + one candidate
    assert response.json() == {
        "totalUsers": 4,
        "totalCompanies": 2,
        "totalProjects": 2,
        "pendingCompanies": 1,
        "pendingProjects": 1,
        "totalPayouts": "250.00",
    }
