from sqlalchemy.exc import OperationalError

from services.profile_service import ProfileService


def test_dashboard_without_session_redirects(client):
    res = client.get("/dashboard", follow_redirects=False)
    assert res.status_code == 303
    assert res.headers["location"] == "/"


def test_dashboard_without_profile_redirects(client, alice):
    _, headers = alice
    res = client.get("/dashboard", headers=headers, follow_redirects=False)
    assert res.status_code == 303
    assert res.headers["location"] == "/"


def test_dashboard_renders_navbar_and_drawer(client, alice):
    _, headers = alice
    client.post("/api/profile/", json={
        "first_name": "Alice", "last_name": "Liddell", "profile_picture": "https://img.example.com/a.png",
    }, headers=headers)

    res = client.get("/dashboard", headers=headers)
    assert res.status_code == 200
    html = res.text
    assert 'id="navbar"' in html
    assert 'id="profile-drawer"' in html
    assert html.count("Liddell") == 2
    assert html.count("https://img.example.com/a.png") == 2


def test_dashboard_reads_session_cookie(client, app, alice):
    user_id, headers = alice
    client.post("/api/profile/", json={"first_name": "Alice", "last_name": "Liddell"}, headers=headers)

    client.cookies.set("token", app.state.auth_service.create_token(user_id))
    res = client.get("/dashboard")
    assert res.status_code == 200
    assert "Alice" in res.text


def test_dashboard_store_failure_renders_empty(client, alice, monkeypatch):
    _, headers = alice

    def broken(self, db, user_id):
        raise OperationalError("SELECT", {}, Exception("db down"))

    monkeypatch.setattr(ProfileService, "get_profile", broken)
    res = client.get("/dashboard", headers=headers)
    assert res.status_code == 200
    assert 'id="navbar"' in res.text
    assert "Alice" not in res.text
