from app.core.security import create_access_token, get_password_hash
from app.models import User, UserRole

from tests.factories import auth_headers, make_user


def test_register_creates_candidate(client, db):
    response = client.post(
        "/api/auth/register",
        json={"email": "Jane@Example.com", "password": "s3cretpass", "firstName": "Jane"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["email"] == "jane@example.com"
    assert body["role"] == UserRole.CANDIDATE
    assert body["firstName"] == "Jane"
    assert "hashedPassword" not in body
    assert db.query(User).count() == 1


def test_register_rejects_duplicate_email(client, db):
    make_user(db, email="jane@example.com")

    response = client.post(
        "/api/auth/register",
        json={"email": "jane@example.com", "password": "s3cretpass"},
    )

    assert response.status_code == 409
    assert response.json()["code"] == "DuplicateResource"


def test_register_rejects_malformed_email(client):
    response = client.post(
        "/api/auth/register",
        json={"email": "not-an-email", "password": "s3cretpass"},
    )

    assert response.status_code == 422


def test_login_issues_token_for_current_user(client, db):
    make_user(db, email="jane@example.com", hashed_password=get_password_hash("s3cretpass"))

    response = client.post(
        "/api/auth/login",
        data={"username": "jane@example.com", "password": "s3cretpass"},
    )
    assert response.status_code == 200
    token = response.json()["access_token"]

    me = client.get("/api/auth/user", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["email"] == "jane@example.com"


def test_login_with_wrong_password(client, db):
    make_user(db, email="jane@example.com", hashed_password=get_password_hash("s3cretpass"))

    response = client.post(
        "/api/auth/login",
        data={"username": "jane@example.com", "password": "wrong-password"},
    )

    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"


def test_current_user_requires_token(client):
    response = client.get("/api/auth/user")

    assert response.status_code == 401
    assert response.json()["code"] == "Unauthenticated"


def test_current_user_rejects_invalid_token(client):
    response = client.get("/api/auth/user", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 401
    assert response.json()["detail"] == "Could not validate credentials"


def test_current_user_with_unknown_id(client, db):
    response = client.get(
        "/api/auth/user",
        headers={"Authorization": f"Bearer {create_access_token(999)}"},
    )

    assert response.status_code == 401
    assert response.json()["code"] == "UserNotFound"


def test_profile_update_changes_only_given_fields(client, db):
    user = make_user(db, first_name="Jane", bio="old bio")

    response = client.patch(
        "/api/profile",
        json={"bio": "Frontend developer", "skills": ["React", "CSS"], "portfolioUrl": "https://jane.dev"},
        headers=auth_headers(user),
    )

    assert response.status_code == 200
    body = response.json()
    assert body["bio"] == "Frontend developer"
    assert body["skills"] == ["React", "CSS"]
    assert body["portfolioUrl"] == "https://jane.dev"
    assert body["firstName"] == "Jane"


def test_profile_update_cannot_change_role(client, db):
    user = make_user(db)

    response = client.patch("/api/profile", json={"role": "admin"}, headers=auth_headers(user))

    assert response.status_code == 200
    db.refresh(user)
    assert user.role == UserRole.CANDIDATE
