from tests.conftest import auth_headers


def test_get_profile(client, alice):
    response = client.get("/api/users/profile", headers=auth_headers(alice["token"]))

    assert response.status_code == 200
    assert response.json()["email"] == "alice@tracker.io"


def test_update_profile(client, alice):
    headers = auth_headers(alice["token"])

    response = client.put("/api/users/profile", json={
        "firstName": " Alicia ",
        "lastName": "Smythe",
        "email": "alicia@tracker.io",
    }, headers=headers)

    assert response.status_code == 200
    body = response.json()
    assert body["firstName"] == "Alicia"
    assert body["lastName"] == "Smythe"
    assert body["email"] == "alicia@tracker.io"

    login = client.post("/api/auth/login", json={"email": "alicia@tracker.io", "password": "secret123"})
    assert login.status_code == 200


def test_update_profile_keeping_own_email(client, alice):
    response = client.put("/api/users/profile", json={
        "firstName": "Alice",
        "lastName": "Brown",
        "email": "alice@tracker.io",
    }, headers=auth_headers(alice["token"]))

    assert response.status_code == 200
    assert response.json()["lastName"] == "Brown"


def test_update_profile_with_taken_email(client, alice, bob):
    response = client.put("/api/users/profile", json={
        "firstName": "Alice",
        "lastName": "Smith",
        "email": "bob@tracker.io",
    }, headers=auth_headers(alice["token"]))

    assert response.status_code == 400
    assert "already taken" in response.json()["message"]


def test_change_password(client, alice):
    headers = auth_headers(alice["token"])

    response = client.put("/api/users/change-password", json={
        "currentPassword": "secret123",
        "newPassword": "newsecret456",
    }, headers=headers)

    assert response.status_code == 200
    assert response.json() == {"message": "Password changed successfully"}
    old = client.post("/api/auth/login", json={"email": "alice@tracker.io", "password": "secret123"})
    new = client.post("/api/auth/login", json={"email": "alice@tracker.io", "password": "newsecret456"})
    assert old.status_code == 400
    assert new.status_code == 200


def test_change_password_with_wrong_current(client, alice):
    response = client.put("/api/users/change-password", json={
        "currentPassword": "not-it",
        "newPassword": "newsecret456",
    }, headers=auth_headers(alice["token"]))

    assert response.status_code == 400
    assert response.json() == {"message": "Current password is incorrect"}


def test_change_password_too_short(client, alice):
    response = client.put("/api/users/change-password", json={
        "currentPassword": "secret123",
        "newPassword": "123",
    }, headers=auth_headers(alice["token"]))

    assert response.status_code == 400


def test_profile_requires_credential(client):
    assert client.get("/api/users/profile").status_code == 401
