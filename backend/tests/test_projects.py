from app.models import CompanyStatus, ProjectStatus, User

from tests.factories import auth_headers, make_company, make_project, make_submission, make_user


def test_public_listing_shows_only_active_projects(client, db):
    company = make_company(db, name="Acme Labs")
    active = make_project(db, company=company, status=ProjectStatus.ACTIVE)
    make_project(db, company=company, status=ProjectStatus.PENDING)
    make_project(db, company=company, status=ProjectStatus.CANCELLED)

    response = client.get("/api/projects")

    assert response.status_code == 200
    body = response.json()
    assert [p["id"] for p in body] == [active.id]
    assert body[0]["company"]["name"] == "Acme Labs"
    assert body[0]["payment"] == "250.00"


def test_listing_is_newest_first(client, db):
    older = make_project(db)
    newer = make_project(db)

    body = client.get("/api/projects").json()

    assert [p["id"] for p in body] == [newer.id, older.id]


def test_single_project_lookup(client, db):
    active = make_project(db)
    pending = make_project(db, status=ProjectStatus.PENDING)

    assert client.get(f"/api/projects/{active.id}").status_code == 200
    assert client.get(f"/api/projects/{pending.id}").status_code == 404
    assert client.get("/api/projects/9999").status_code == 404


def test_featured_requires_session_and_is_capped(client, db):
    company = make_company(db)
    for _ in range(8):
        make_project(db, company=company)
    user = make_user(db)

    assert client.get("/api/projects/featured").status_code == 401

    response = client.get("/api/projects/featured", headers=auth_headers(user))
    assert response.status_code == 200
    assert len(response.json()) == 6


def test_company_creates_pending_project(client, db):
    company = make_company(db, status=CompanyStatus.APPROVED)
    owner = db.get(User, company.user_id)

    response = client.post(
        "/api/company/projects",
        json={
            "title": "Build landing page",
            "description": "Responsive landing page",
            "payment": "250.00",
            "skills": ["HTML", "CSS"],
            "difficulty": "Beginner",
            "deadline": "2030-01-01T12:00:00+02:00",
            "maxSubmissions": 3,
        },
        headers=auth_headers(owner),
    )

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == ProjectStatus.PENDING
    assert body["companyId"] == company.id
    assert body["payment"] == "250.00"
    assert body["difficulty"] == "beginner"
    assert body["maxSubmissions"] == 3
    assert body["deadline"].startswith("2030-01-01T10:00:00")


def test_project_creation_validates_input(client, db):
    company = make_company(db)
    headers = auth_headers(db.get(User, company.user_id))
    base = {"title": "Build landing page", "description": "Landing page", "payment": "250.00"}

    assert client.post("/api/company/projects", json={**base, "payment": "0"}, headers=headers).status_code == 422
    assert client.post("/api/company/projects", json={**base, "payment": "1.005"}, headers=headers).status_code == 422
    assert client.post("/api/company/projects", json={**base, "difficulty": "expert"}, headers=headers).status_code == 422
    assert client.post("/api/company/projects", json={**base, "title": ""}, headers=headers).status_code == 422


def test_company_projects_include_submissions_and_candidates(client, db):
    company = make_company(db)
    owner = db.get(User, company.user_id)
    project = make_project(db, company=company)
    candidate = make_user(db, first_name="John")
    submission = make_submission(db, project, candidate=candidate)
    make_project(db)  # another company's project

    response = client.get("/api/company/projects", headers=auth_headers(owner))

    assert response.status_code == 200
    [listed] = response.json()
    assert listed["id"] == project.id
    assert listed["submissions"][0]["id"] == submission.id
    assert listed["submissions"][0]["candidate"]["firstName"] == "John"


def test_company_projects_without_company(client, db):
    user = make_user(db)

    response = client.get("/api/company/projects", headers=auth_headers(user))

    assert response.status_code == 404
