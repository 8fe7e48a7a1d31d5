# tests/test_auth_api.py


def test_register_returns_user_without_password(client) -> None:
    response = client.post(
        "/api/auth/register",
        json={"name": "Grace Hopper", "email": "Grace@Example.com", "password": "cobol1959"},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["token_type"] == "bearer"
    assert data["access_token"]
    assert data["user"]["email"] == "grace@example.com"
    assert data["user"]["name"] == "Grace Hopper"
    assert "password" not in data["user"]
    assert "hashed_password" not in data["user"]
    assert "token" in response.cookies


def test_register_rejects_duplicate_email(client, register_user) -> None:
    register_user(email="dup@example.com")
    response = client.post(
        "/api/auth/register",
        json={"name": "Other", "email": "DUP@example.com", "password": "another1"},
    )
    assert response.status_code == 400


def test_register_validates_fields(client) -> None:
    short_password = {"name": "Ada", "email": "ada@example.com", "password": "123"}
    bad_email = {"name": "Ada", "email": "ada-at-example", "password": "secret123"}
    short_name = {"name": "A", "email": "ada@example.com", "password": "secret123"}
    for payload in (short_password, bad_email, short_name):
        assert client.post("/api/auth/register", json=payload).status_code == 422


def test_signin_and_me(client, register_user) -> None:
    register_user(email="ada@example.com", password="secret123")

    response = client.post("/api/auth/signin", json={"email": "ada@example.com", "password": "secret123"})
    assert response.status_code == 200
    token = response.json()["access_token"]
    client.cookies.clear()

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["email"] == "ada@example.com"
    assert "hashed_password" not in me.json()


def test_signin_with_wrong_password(client, register_user) -> None:
    register_user(email="ada@example.com", password="secret123")
    response = client.post("/api/auth/signin", json={"email": "ada@example.com", "password": "wrong-pass"})
    assert response.status_code == 401


def test_me_requires_authentication(client) -> None:
    assert client.get("/api/auth/me").status_code == 401
    bogus = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert bogus.status_code == 401


def test_session_endpoint(client, register_user) -> None:
    assert client.get("/api/auth/session").json() == {"session": None, "user": None}

    headers = register_user()
    data = client.get("/api/auth/session", headers=headers).json()
    assert data["user"]["email"] == "ada@example.com"
    assert data["session"]["userId"] == data["user"]["id"]


def test_cookie_session_and_signout(client) -> None:
    client.post(
        "/api/auth/register",
        json={"name": "Cookie Monster", "email": "cookie@example.com", "password": "chocolate"},
    )
    assert client.get("/api/auth/me").status_code == 200

    response = client.post("/api/auth/signout")
    assert response.json() == {"success": True}
    client.cookies.clear()
    assert client.get("/api/auth/me").status_code == 401
