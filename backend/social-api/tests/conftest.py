import pytest
from fastapi.testclient import TestClient

from main import create_app
from models.user import User
from settings import Settings


@pytest.fixture
def settings():
    return Settings(
        APP_ENV="test",
        DATABASE_URL="sqlite://",
        JWT_SECRET="test-secret",
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db_session(app, client):
    with app.state.database.SessionLocal() as session:
        yield session


@pytest.fixture
def make_user(client, app):
    """register + login, returns (user_id, auth headers)"""

    def _make(email="alice@example.com", password="secret123", admin=False):
        res = client.post("/api/auth/register", json={
            "email": email, "password": password, "password2": password,
        })
        assert res.status_code == 200, res.text
        user_id = res.json()["id"]

        if admin:
            with app.state.database.SessionLocal() as session:
                session.get(User, user_id).is_admin = True
                session.commit()

        res = client.post("/api/auth/login", json={"email": email, "password": password})
        assert res.status_code == 200, res.text
        return user_id, {"Authorization": res.json()["token"]}

    return _make


@pytest.fixture
def alice(make_user):
    return make_user("alice@example.com")


@pytest.fixture
def bob(make_user):
    return make_user("bob@example.com")


@pytest.fixture
def create_post(client):
    def _create(headers, title="Hello World", body="First post body"):
        res = client.post("/api/posts/create", json={"title": title, "body": body}, headers=headers)
        assert res.status_code == 200, res.text
        return res.json()

    return _create
