"""Registration, login and session restore through the API."""

from ponsectors.domain.enums import UserRole

ADMIN_EMAIL = "admin@ponsectors.com"
PASSWORD = "secret123"


def test_register_and_login(client, sign_up):
    headers = sign_up("Amir")

    response = client.get("/api/auth/me", headers=headers)
    assert response.status_code == 200
    body = response.json()
    assert body["user"]["email"] == "amir@example.com"
    assert body["effective_role"] == UserRole.STANDARD.value


def test_duplicate_email_is_rejected(client, sign_up):
    sign_up("Amir")
    response = client.post(
        "/api/auth/register",
        json={"email": "AMIR@example.com", "password": PASSWORD, "name": "Again"},
    )
    assert response.status_code == 409
    assert response.json()["error"]["code"] == "EmailAlreadyRegisteredException"


def test_wrong_password(client, sign_up):
    sign_up("Amir")
    response = client.post("/api/auth/login", json={"email": "amir@example.com", "password": "nope"})
    assert response.status_code == 401
    assert response.json()["error"]["code"] == "InvalidCredentialsException"


def test_missing_token(client):
    response = client.get("/api/projects")
    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"


def test_garbage_token(client):
    response = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401


def test_allow_listed_email_gets_admin(client, sign_up, store):
    headers = sign_up("Admin", email=ADMIN_EMAIL)

    me = client.get("/api/auth/me", headers=headers).json()
    assert me["effective_role"] == UserRole.ADMIN.value
    assert store.users.get_by_email(ADMIN_EMAIL).role == UserRole.ADMIN

    assert client.get("/api/admin/stats", headers=headers).status_code == 200


def test_logout_is_stateless(client, sign_up):
    headers = sign_up("Amir")
    assert client.post("/api/auth/logout", headers=headers).status_code == 204


def test_profile_update(client, sign_up):
    headers = sign_up("Amir")
    response = client.patch(
        "/api/users/me",
        headers=headers,
        json={"city": "Hawassa", "focus_areas": ["Education"]},
    )
    assert response.status_code == 200
    assert response.json()["city"] == "Hawassa"
    assert response.json()["focus_areas"] == ["Education"]


def test_register_checks_subtype_and_country(client):
    base = {"email": "org@example.com", "password": PASSWORD, "name": "Org"}

    wrong_subtype = client.post(
        "/api/auth/register", json={**base, "stakeholder_type": "Individual", "subtype": "NGO"}
    )
    assert wrong_subtype.status_code == 422

    unknown_country = client.post("/api/auth/register", json={**base, "country": "Atlantis"})
    assert unknown_country.status_code == 422

    ok = client.post(
        "/api/auth/register",
        json={**base, "stakeholder_type": "Organization", "subtype": "NGO", "country": "Ghana"},
    )
    assert ok.status_code == 201, ok.text


def test_profile_update_rejects_mismatched_subtype(client, sign_up):
    headers = sign_up("Amir")
    assert client.patch("/api/users/me", headers=headers, json={"subtype": "Student"}).status_code == 200

    response = client.patch("/api/users/me", headers=headers, json={"stakeholder_type": "Group"})
    assert response.status_code == 422
    assert response.json()["error"]["code"] == "BusinessRuleViolationException"

    switched = client.patch(
        "/api/users/me", headers=headers, json={"stakeholder_type": "Group", "subtype": "Coalition"}
    )
    assert switched.status_code == 200
    assert switched.json()["subtype"] == "Coalition"
