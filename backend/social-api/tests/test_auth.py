from services.auth_service import hash_password, verify_password


def test_register_and_login(client):
    res = client.post("/api/auth/register", json={
        "email": "Carol@Example.com", "password": "secret123", "password2": "secret123",
    })
    assert res.status_code == 200
    assert res.json()["email"] == "carol@example.com"
    assert "password_hash" not in res.json()

    res = client.post("/api/auth/login", json={"email": "carol@example.com", "password": "secret123"})
    assert res.status_code == 200
    assert res.json()["success"] is True
    assert res.json()["token"].startswith("Bearer ")
    assert "token" in res.cookies


def test_register_validation_errors(client):
    res = client.post("/api/auth/register", json={"email": "not-an-email", "password": "123", "password2": "456"})
    assert res.status_code == 400
    assert set(res.json()) == {"email", "password", "password2"}


def test_register_duplicate_email(client, alice):
    res = client.post("/api/auth/register", json={
        "email": "alice@example.com", "password": "secret123", "password2": "secret123",
    })
    assert res.status_code == 400
    assert res.json() == {"email": "Email already exists."}


def test_login_failures(client, alice):
    res = client.post("/api/auth/login", json={"email": "nobody@example.com", "password": "secret123"})
    assert res.status_code == 404

    res = client.post("/api/auth/login", json={"email": "alice@example.com", "password": "wrong-password"})
    assert res.status_code == 400
    assert "password" in res.json()


def test_current_user(client, alice):
    user_id, headers = alice
    res = client.get("/api/auth/current", headers=headers)
    assert res.status_code == 200
    assert res.json()["id"] == user_id


def test_invalid_tokens_rejected(client, app, alice):
    assert client.get("/api/auth/current").status_code == 401
    assert client.get("/api/auth/current", headers={"Authorization": "Token abc"}).status_code == 401
    assert client.get("/api/auth/current", headers={"Authorization": "Bearer garbage"}).status_code == 401

    other = app.state.auth_service.create_token(9999)
    assert client.get("/api/auth/current", headers={"Authorization": f"Bearer {other}"}).status_code == 401


def test_password_hashing():
    stored = hash_password("hunter22")
    assert stored != "hunter22"
    assert verify_password("hunter22", stored)
    assert not verify_password("hunter23", stored)
    assert not verify_password("hunter22", "malformed")
