def test_create_post_derives_handle(client, alice):
    user_id, headers = alice
    res = client.post("/api/posts/create", json={"title": "My First Post", "body": "hi"}, headers=headers)

    assert res.status_code == 200
    post = res.json()
    assert post["handle"] == "my-first-post"
    assert post["user_id"] == user_id
    assert post["title"] == "My First Post"
    assert post["comments"] == []
    assert post["likes"] == []


def test_create_post_requires_auth(client):
    res = client.post("/api/posts/create", json={"title": "x", "body": "y"})
    assert res.status_code == 401


def test_create_post_rejects_invalid_input(client, alice):
    _, headers = alice
    res = client.post("/api/posts/create", json={"title": "  "}, headers=headers)

    assert res.status_code == 400
    assert set(res.json()) == {"title", "body"}


def test_create_post_wrong_type_is_400(client, alice):
    _, headers = alice
    res = client.post("/api/posts/create", json={"title": 5, "body": "x"}, headers=headers)

    assert res.status_code == 400
    assert "title" in res.json()


def test_create_post_without_body_is_400(client, alice):
    _, headers = alice
    res = client.post("/api/posts/create", headers=headers)

    assert res.status_code == 400
    assert res.json()


def test_get_post_by_handle(client, alice, create_post):
    _, headers = alice
    created = create_post(headers, title="Lookup Me")

    res = client.get("/api/posts/get/lookup-me")
    assert res.status_code == 200
    assert res.json()["id"] == created["id"]


def test_get_missing_handle_returns_404(client):
    res = client.get("/api/posts/get/nope")
    assert res.status_code == 404
    assert res.json() == {"error": "No post with the nope found."}


def test_edit_post_recomputes_handle(client, alice, create_post):
    _, headers = alice
    post = create_post(headers)

    res = client.put(f"/api/posts/edit/{post['id']}", json={"title": "New Title Here", "body": "changed"},
                     headers=headers)
    assert res.status_code == 200
    assert res.json()["handle"] == "new-title-here"
    assert res.json()["body"] == "changed"
    assert client.get("/api/posts/get/hello-world").status_code == 404


def test_edit_by_non_owner_is_not_found(client, alice, bob, create_post):
    _, alice_headers = alice
    _, bob_headers = bob
    post = create_post(alice_headers)

    res = client.put(f"/api/posts/edit/{post['id']}", json={"title": "Hijack", "body": "x"}, headers=bob_headers)
    assert res.status_code == 404
    assert client.get("/api/posts/get/hello-world").json()["title"] == "Hello World"


def test_delete_post(client, alice, create_post):
    _, headers = alice
    post = create_post(headers)

    res = client.delete(f"/api/posts/delete/{post['id']}", headers=headers)
    assert res.status_code == 200
    assert res.json()["deleted"] is True
    assert isinstance(res.json()["timestamp"], int)
    assert client.get("/api/posts/get/hello-world").status_code == 404


def test_delete_by_non_owner_is_not_found(client, alice, bob, create_post):
    _, alice_headers = alice
    _, bob_headers = bob
    post = create_post(alice_headers)

    res = client.delete(f"/api/posts/delete/{post['id']}", headers=bob_headers)
    assert res.status_code == 404
    assert client.get("/api/posts/get/hello-world").status_code == 200


def test_comment_appends_with_profile_names(client, alice, bob, create_post):
    _, alice_headers = alice
    bob_id, bob_headers = bob
    create_post(alice_headers)
    client.post("/api/profile/", json={"first_name": "Bob", "last_name": "Builder"}, headers=bob_headers)

    res = client.put("/api/posts/comment/hello-world", json={"text": "Nice post"}, headers=bob_headers)
    assert res.status_code == 200
    comments = res.json()["comments"]
    assert len(comments) == 1
    assert comments[0]["user_id"] == bob_id
    assert comments[0]["first_name"] == "Bob"
    assert comments[0]["text"] == "Nice post"

    res = client.put("/api/posts/comment/hello-world", json={"text": "Second"}, headers=bob_headers)
    assert [c["text"] for c in res.json()["comments"]] == ["Nice post", "Second"]


def test_comment_on_missing_post_returns_404(client, alice):
    _, headers = alice
    res = client.put("/api/posts/comment/missing", json={"text": "hello"}, headers=headers)
    assert res.status_code == 404


def test_comment_without_text_fails(client, alice, create_post):
    _, headers = alice
    create_post(headers)
    res = client.put("/api/posts/comment/hello-world", json={}, headers=headers)
    assert res.status_code == 500
    assert client.get("/api/posts/get/hello-world").json()["comments"] == []


def test_comment_edit_and_delete_leave_comments_unchanged(client, alice, create_post):
    _, headers = alice
    create_post(headers)
    before = client.put("/api/posts/comment/hello-world", json={"text": "keep me"}, headers=headers).json()
    comment_id = before["comments"][0]["id"]

    res = client.patch(f"/api/posts/comment/edit/hello-world/{comment_id}", json={"text": "edited"},
                       headers=headers)
    assert res.status_code == 200
    assert [c["text"] for c in res.json()] == ["keep me"]

    res = client.delete(f"/api/posts/comment/delete/hello-world/{comment_id}", headers=headers)
    assert res.status_code == 200
    assert [c["text"] for c in res.json()] == ["keep me"]


def test_comment_edit_validation_and_missing_post(client, alice, create_post):
    _, headers = alice
    create_post(headers)

    res = client.patch("/api/posts/comment/edit/hello-world/1", json={"text": ""}, headers=headers)
    assert res.status_code == 500
    assert "text" in res.json()

    assert client.patch("/api/posts/comment/edit/nope/1", json={"text": "x"}, headers=headers).status_code == 404
    assert client.delete("/api/posts/comment/delete/nope/1", headers=headers).status_code == 404


def test_like_toggles(client, alice, bob, create_post):
    _, alice_headers = alice
    bob_id, bob_headers = bob
    create_post(alice_headers)

    res = client.patch("/api/posts/like/hello-world", headers=bob_headers)
    assert res.status_code == 200
    assert res.json()["likes"] == [bob_id]

    res = client.patch("/api/posts/like/hello-world", headers=bob_headers)
    assert res.status_code == 200
    assert res.json()["likes"] == []


def test_like_lost_race_reports_liked(client, alice, bob, create_post, monkeypatch):
    from routers import post_router

    _, alice_headers = alice
    bob_id, bob_headers = bob
    create_post(alice_headers)
    assert client.patch("/api/posts/like/hello-world", headers=bob_headers).json()["likes"] == [bob_id]

    # the lookup misses the existing row, so the insert hits the unique constraint
    monkeypatch.setattr(post_router.post_service, "find_like", lambda db, post_id, user_id: None)
    res = client.patch("/api/posts/like/hello-world", headers=bob_headers)

    assert res.status_code == 200
    assert res.json()["likes"] == [bob_id]


def test_like_own_post_forbidden(client, alice, create_post):
    _, headers = alice
    create_post(headers)

    res = client.patch("/api/posts/like/hello-world", headers=headers)
    assert res.status_code == 403
    assert res.json() == {"error": "You cannot like your own post."}
    assert client.get("/api/posts/get/hello-world").json()["likes"] == []


def test_like_missing_post(client, alice):
    _, headers = alice
    assert client.patch("/api/posts/like/missing", headers=headers).status_code == 404


def test_delete_post_removes_comments_and_likes(client, app, alice, bob, create_post):
    from models.post import Comment, PostLike

    _, alice_headers = alice
    _, bob_headers = bob
    post = create_post(alice_headers)
    client.put("/api/posts/comment/hello-world", json={"text": "hi"}, headers=bob_headers)
    client.patch("/api/posts/like/hello-world", headers=bob_headers)

    client.delete(f"/api/posts/delete/{post['id']}", headers=alice_headers)
    with app.state.database.SessionLocal() as session:
        assert session.query(Comment).count() == 0
        assert session.query(PostLike).count() == 0
