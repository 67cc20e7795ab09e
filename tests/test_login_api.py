from datetime import timedelta

import pytest

from security import Identity, create_access_token

NEW_POST = {"title": "fake title", "author": "fake author", "url": "fakeurl.com", "likes": 0}


@pytest.fixture()
def token(client, root_user):
    response = client.post("/api/login", json={"username": "root", "password": "sekret"})
    return response.json()["token"]


def test_user_can_login_with_valid_credentials(client, root_user):
    response = client.post("/api/login", json={"username": "root", "password": "sekret"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    body = response.json()
    assert body["username"] == "root"
    assert body["name"] == "Superuser"
    assert body["token"]


@pytest.mark.parametrize("credentials", [
    {"username": "fake", "password": "sekret"},
    {"username": "root", "password": "wrong"},
])
def test_invalid_credentials_return_401(client, root_user, credentials):
    response = client.post("/api/login", json=credentials)

    assert response.status_code == 401
    assert response.json() == {"error": "invalid username or password"}


def test_login_without_password_is_a_bad_request(client):
    response = client.post("/api/login", json={"username": "root"})

    assert response.status_code == 400
    assert "error" in response.json()


def test_posting_works_with_valid_token(client, token):
    response = client.post("/api/blogs", json=NEW_POST, headers={"Authorization": f"bearer {token}"})

    assert response.status_code == 200
    assert response.json()["title"] == NEW_POST["title"]


def test_posting_with_invalid_token_returns_401(client, token):
    response = client.post("/api/blogs", json=NEW_POST, headers={"Authorization": f"bearer {token}a"})

    assert response.status_code == 401
    assert response.json()["error"] == "invalid token"


def test_posting_with_expired_token_returns_401(client, root_user):
    expired = create_access_token(Identity(user_id=root_user.id, username="root"),
                                  expires_delta=timedelta(seconds=-1))

    response = client.post("/api/blogs", json=NEW_POST, headers={"Authorization": f"bearer {expired}"})

    assert response.status_code == 401
    assert response.json()["error"] == "token expired"


def test_posting_without_token_returns_401(client):
    response = client.post("/api/blogs", json=NEW_POST)

    assert response.status_code == 401
    assert response.json()["error"] == "token missing or invalid"


def test_scheme_keyword_is_case_sensitive(client, token):
    response = client.post("/api/blogs", json=NEW_POST, headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json()["error"] == "token missing or invalid"


def test_bad_token_is_rejected_even_on_reads(client, token):
    assert client.get("/api/blogs", headers={"Authorization": "bearer nonsense"}).status_code == 401
    assert client.get("/api/blogs", headers={"Authorization": "Basic dXNlcjpwYXNz"}).status_code == 200


def test_token_for_deleted_user_cannot_post(client):
    ghost = create_access_token(Identity(user_id=999, username="ghost"))

    response = client.post("/api/blogs", json=NEW_POST, headers={"Authorization": f"bearer {ghost}"})

    assert response.status_code == 401
    assert response.json()["error"] == "user not found"
