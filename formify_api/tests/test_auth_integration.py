from __future__ import annotations

import smtplib

from flask.testing import FlaskClient

from formify_api.container import Container
from formify_api.domain.users.exceptions import MailDeliveryError

JOHN = {
    "firstName": "John",
    "lastName": "Doe",
    "email": "john@x.com",
    "password": "secret123",
}


def _bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def _login(client: FlaskClient) -> str:
    client.post("/signup", json=JOHN)
    response = client.post("/login", json={"email": JOHN["email"], "password": JOHN["password"]})
    assert response.status_code == 200
    return response.get_json()["token"]


def test_signup_login_validate_expire_flow(client: FlaskClient, clock) -> None:
    signup = client.post("/signup", json=JOHN)
    assert signup.status_code == 201
    assert signup.get_json() == {"message": "User created successfully"}

    login = client.post("/login", json={"email": "john@x.com", "password": "secret123"})
    assert login.status_code == 200
    body = login.get_json()
    assert body["firstName"] == "John"
    assert body["lastName"] == "Doe"
    token = body["token"]

    validate = client.post("/validate-token", headers=_bearer(token))
    assert validate.status_code == 200
    assert validate.get_json() == {"user": {"firstName": "John", "lastName": "Doe"}}

    clock.advance(hours=1, seconds=1)
    expired = client.post("/validate-token", headers=_bearer(token))
    assert expired.status_code == 401
    assert expired.get_json() == {"error": "invalid_token", "message": "Invalid token"}


def test_password_whitespace_is_kept_as_sent(client: FlaskClient) -> None:
    spaced = {**JOHN, "password": " secret123 "}
    assert client.post("/signup", json=spaced).status_code == 201

    exact = client.post("/login", json={"email": "john@x.com", "password": " secret123 "})
    trimmed = client.post("/login", json={"email": "john@x.com", "password": "secret123"})

    assert exact.status_code == 200
    assert trimmed.status_code == 400
    assert trimmed.get_json()["error"] == "invalid_credentials"


def test_whitespace_only_password_is_accepted(client: FlaskClient) -> None:
    blank = {**JOHN, "email": "blank@x.com", "password": "   "}

    assert client.post("/signup", json=blank).status_code == 201
    assert client.post("/login", json={"email": "blank@x.com", "password": "   "}).status_code == 200


def test_form_encoded_bodies_are_accepted(client: FlaskClient, mailer) -> None:
    signup = client.post("/signup", data=JOHN)
    login = client.post("/login", data={"email": "john@x.com", "password": "secret123"})
    subscribe = client.post("/subscribe", data={"email": "fan@x.com"})

    assert signup.status_code == 201
    assert login.status_code == 200
    assert login.get_json()["firstName"] == "John"
    assert subscribe.status_code == 200
    assert mailer.sent[0]["to"] == "fan@x.com"


def test_password_is_stored_hashed(client: FlaskClient, container: Container) -> None:
    client.post("/signup", json=JOHN)

    stored = container.user_repository.find_by_email("john@x.com")
    assert stored is not None
    assert stored.password_hash != "secret123"
    assert container.password_hasher.verify("secret123", stored.password_hash)


def test_duplicate_signup_keeps_single_record(client: FlaskClient, container: Container) -> None:
    assert client.post("/signup", json=JOHN).status_code == 201

    again = client.post("/signup", json={**JOHN, "email": "JOHN@x.com", "firstName": "Johnny"})

    assert again.status_code == 400
    assert again.get_json() == {"error": "user_already_exists", "message": "User already exists"}
    assert container.user_repository.count() == 1


def test_wrong_password_and_unknown_email_are_identical(client: FlaskClient) -> None:
    client.post("/signup", json=JOHN)

    wrong_password = client.post("/login", json={"email": "john@x.com", "password": "nope"})
    unknown_email = client.post("/login", json={"email": "ghost@x.com", "password": "secret123"})

    assert wrong_password.status_code == unknown_email.status_code == 400
    assert wrong_password.get_json() == unknown_email.get_json()


def test_validate_token_failures(client: FlaskClient, container: Container) -> None:
    missing = client.post("/validate-token")
    garbage = client.post("/validate-token", headers=_bearer("not-a-token"))
    orphan = client.post("/validate-token", headers=_bearer(container.token_service.issue(999)))

    assert missing.status_code == 401
    assert missing.get_json()["message"] == "No token provided"
    assert garbage.status_code == 401
    assert garbage.get_json()["message"] == "Invalid token"
    assert orphan.status_code == 404
    assert orphan.get_json()["message"] == "User not found"


def test_profile_requires_token(client: FlaskClient) -> None:
    assert client.get("/api/profile").status_code == 401
    assert client.put("/api/profile", json={"firstName": "John"}).status_code == 401
    assert client.get("/api/profile", headers=_bearer("forged")).status_code == 401


def test_profile_update_checks_token_before_body(client: FlaskClient) -> None:
    token = _login(client)

    forged = client.put("/api/profile", headers=_bearer("forged"), json={"firstName": 5})
    anonymous = client.put("/api/profile", json={"firstName": 5})
    malformed = client.put("/api/profile", headers=_bearer(token), json={"firstName": 5})

    assert forged.status_code == 401
    assert forged.get_json() == {"error": "invalid_token", "message": "Invalid token"}
    assert anonymous.status_code == 401
    assert anonymous.get_json()["error"] == "missing_token"
    assert malformed.status_code == 400
    assert malformed.get_json()["message"] == "Invalid profile data"


def test_profile_read_write(client: FlaskClient) -> None:
    token = _login(client)

    missing = client.get("/api/profile", headers=_bearer(token))
    assert missing.status_code == 404
    assert missing.get_json()["message"] == "Profile not found"

    updated = client.put(
        "/api/profile",
        headers=_bearer(token),
        json={"firstName": "John", "userId": 777, "unknown": True},
    )
    assert updated.status_code == 200
    document = updated.get_json()
    assert document["firstName"] == "John"
    assert document["userId"] != 777
    assert "unknown" not in document

    fetched = client.get("/api/profile", headers=_bearer(token))
    assert fetched.status_code == 200
    assert fetched.get_json() == document


def test_profile_nested_company_is_replaced_not_merged(client: FlaskClient) -> None:
    token = _login(client)

    client.put(
        "/api/profile",
        headers=_bearer(token),
        json={"company": {"address": {"city": "Amsterdam"}}},
    )
    second = client.put("/api/profile", headers=_bearer(token), json={"company": {"name": "Acme"}})

    assert second.status_code == 200
    assert second.get_json()["company"] == {"name": "Acme"}
    assert "address" not in client.get("/api/profile", headers=_bearer(token)).get_json()["company"]


def test_profile_top_level_fields_survive_partial_update(client: FlaskClient) -> None:
    token = _login(client)

    client.put(
        "/api/profile",
        headers=_bearer(token),
        json={"firstName": "John", "company": {"vatNumber": "NL001"}},
    )
    second = client.put("/api/profile", headers=_bearer(token), json={"lastName": "Doe"})

    assert second.get_json()["firstName"] == "John"
    assert second.get_json()["lastName"] == "Doe"
    assert second.get_json()["company"] == {"vatNumber": "NL001"}


def test_subscribe_sends_welcome_mail(client: FlaskClient, mailer) -> None:
    response = client.post("/subscribe", json={"email": "fan@x.com"})

    assert response.status_code == 200
    assert response.get_json() == {"message": "Subscription successful! Check your email."}
    assert len(mailer.sent) == 1
    assert mailer.sent[0]["to"] == "fan@x.com"
    assert mailer.sent[0]["subject"] == "Welcome to FormifyX!"
    assert "https://formifyx.nl" in mailer.sent[0]["html"]


def test_subscribe_requires_email(client: FlaskClient, mailer) -> None:
    response = client.post("/subscribe", json={})

    assert response.status_code == 400
    assert response.get_json()["message"] == "Email is required"
    assert mailer.sent == []


def test_subscribe_delivery_failure_is_500(client: FlaskClient, mailer) -> None:
    mailer.error = MailDeliveryError()
    failed = client.post("/subscribe", json={"email": "fan@x.com"})

    mailer.error = smtplib.SMTPAuthenticationError(535, b"bad credentials")
    crashed = client.post("/subscribe", json={"email": "fan@x.com"})

    assert failed.status_code == 500
    assert failed.get_json()["message"] == "Failed to send email"
    assert crashed.status_code == 500
    assert crashed.get_json() == {"error": "internal_error", "message": "Something went wrong"}


def test_index_and_health(client: FlaskClient) -> None:
    index = client.get("/")
    health = client.get("/api/health")

    assert index.status_code == 200
    assert index.get_data(as_text=True) == "Welcome to FormifyX Backend!"
    assert health.get_json() == {"ok": True, "database": "ok"}


def test_cors_allows_configured_origin(client: FlaskClient) -> None:
    allowed = client.options(
        "/login",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )
    denied = client.post("/login", json={}, headers={"Origin": "https://evil.example"})

    assert allowed.headers.get("Access-Control-Allow-Origin") == "http://localhost:5173"
    assert allowed.headers.get("Access-Control-Allow-Credentials") == "true"
    assert "Access-Control-Allow-Origin" not in denied.headers
