from datetime import timedelta

import pytest

from app.core.errors import DuplicateSubmission, ProjectNotOpen
from app.crud import submissions as submission_crud
from app.db.base import utcnow
from app.models import ProjectStatus, Submission, SubmissionStatus
from app.services import submit_work

from tests.factories import auth_headers, context_for, make_project, make_submission, make_user


def test_submit_to_active_project(client, db):
    project = make_project(db)
    candidate = make_user(db)

    response = client.post(
        f"/api/projects/{project.id}/submissions",
        json={"content": "done", "attachmentUrl": "https://github.com/x/landing"},
        headers=auth_headers(candidate),
    )

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == SubmissionStatus.PENDING
    assert body["candidateId"] == candidate.id
    assert body["attachmentUrl"] == "https://github.com/x/landing"


@pytest.mark.parametrize(
    "status",
    [ProjectStatus.PENDING, ProjectStatus.CANCELLED, ProjectStatus.COMPLETED],
)
def test_submit_to_project_that_is_not_active(client, db, status):
    project = make_project(db, status=status)

    response = client.post(
        f"/api/projects/{project.id}/submissions",
        json={"content": "done"},
        headers=auth_headers(make_user(db)),
    )

    assert response.status_code == 409
    assert response.json()["code"] == "ProjectNotOpen"
    assert db.query(Submission).count() == 0


def test_submit_to_unknown_project(client, db):
    response = client.post(
        "/api/projects/9999/submissions",
        json={"content": "done"},
        headers=auth_headers(make_user(db)),
    )

    assert response.status_code == 404


def test_submission_requires_content(client, db):
    project = make_project(db)

    response = client.post(
        f"/api/projects/{project.id}/submissions",
        json={"content": ""},
        headers=auth_headers(make_user(db)),
    )

    assert response.status_code == 422


def test_second_submission_is_rejected(client, db):
    project = make_project(db)
    headers = auth_headers(make_user(db))
    client.post(f"/api/projects/{project.id}/submissions", json={"content": "v1"}, headers=headers)

    response = client.post(f"/api/projects/{project.id}/submissions", json={"content": "v2"}, headers=headers)

    assert response.status_code == 409
    assert response.json()["code"] == "DuplicateSubmission"
    assert db.query(Submission).count() == 1


def test_unique_constraint_catches_racing_submission(db, monkeypatch):
    project = make_project(db)
    candidate = make_user(db)
    submit_work(db, context_for(candidate), project.id, "first")

    # A concurrent request that read "no submission yet" before the insert
    monkeypatch.setattr(submission_crud, "get_submission_by_project_and_candidate", lambda *args: None)

    with pytest.raises(DuplicateSubmission):
        submit_work(db, context_for(candidate), project.id, "second")
    assert db.query(Submission).count() == 1


def test_submission_after_deadline(db):
    project = make_project(db, deadline=utcnow() - timedelta(days=1))

    with pytest.raises(ProjectNotOpen, match="deadline"):
        submit_work(db, context_for(make_user(db)), project.id, "late")


def test_submission_limit(db):
    project = make_project(db, max_submissions=1)
    make_submission(db, project)

    with pytest.raises(ProjectNotOpen, match="limit"):
        submit_work(db, context_for(make_user(db)), project.id, "one too many")


def test_rejected_submission_frees_its_slot(db):
    project = make_project(db, max_submissions=1)
    make_submission(db, project, status=SubmissionStatus.REJECTED)

    submission = submit_work(db, context_for(make_user(db)), project.id, "second try")

    assert submission.status == SubmissionStatus.PENDING
    assert submission_crud.count_submissions(db, project_id=project.id) == 2


def test_my_submission(client, db):
    project = make_project(db)
    candidate = make_user(db)
    headers = auth_headers(candidate)

    assert client.get(f"/api/projects/{project.id}/my-submission", headers=headers).status_code == 404

    submission = make_submission(db, project, candidate=candidate)
    response = client.get(f"/api/projects/{project.id}/my-submission", headers=headers)
    assert response.status_code == 200
    assert response.json()["id"] == submission.id


def test_candidate_submission_history(client, db):
    project = make_project(db, title="Build landing page")
    candidate = make_user(db)
    make_submission(db, project, candidate=candidate)
    make_submission(db, make_project(db), candidate=make_user(db))

    response = client.get("/api/candidate/submissions", headers=auth_headers(candidate))

    assert response.status_code == 200
    [item] = response.json()
    assert item["project"]["title"] == "Build landing page"
    assert item["project"]["company"] == {"name": "Acme Labs"}
