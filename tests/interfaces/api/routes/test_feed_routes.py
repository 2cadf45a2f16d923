"""Tests for the post, campaign, ministry and chat endpoints."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient


def _notifications(client: TestClient, headers) -> list[dict]:
    return client.get("/notifications/", headers=headers).json()


def test_like_toggle(client: TestClient, make_user, make_post, auth_headers) -> None:
    author = make_user()
    reader = make_user()
    post = make_post(author)
    headers = auth_headers(reader)

    responses = [client.post(f"/posts/{post.id}/like", headers=headers).json() for _ in range(3)]

    assert responses == [
        {"liked": True, "likes_count": 1},
        {"liked": False, "likes_count": 0},
        {"liked": True, "likes_count": 1},
    ]
    assert len(_notifications(client, auth_headers(author))) == 1


def test_like_missing_post(client: TestClient, make_user, auth_headers) -> None:
    user = make_user()

    response = client.post("/posts/999/like", headers=auth_headers(user))

    assert response.status_code == 404


def test_publish_post_and_comment(client: TestClient, make_user, auth_headers) -> None:
    author = make_user("Anna")
    reader = make_user("Ben")
    author_headers = auth_headers(author)
    reader_headers = auth_headers(reader)
    client.post(f"/users/{author.id}/follow", headers=reader_headers)

    created = client.post(
        "/posts/", json={"title": "Hope", "content": "Romans 15:13"}, headers=author_headers
    )
    assert created.status_code == 201
    post_id = created.json()["id"]
    assert client.get(f"/posts/{post_id}", headers=reader_headers).json()["title"] == "Hope"

    (post_notification,) = _notifications(client, reader_headers)
    assert post_notification["type"] == "post"
    assert post_notification["related_id"] == post_id

    comment = client.post(
        f"/posts/{post_id}/comment", json={"content": "Amen"}, headers=reader_headers
    )
    assert comment.status_code == 201
    assert comment.json()["created"] is True
    assert comment.json()["interaction"]["body"] == "Amen"

    comments = client.get(f"/posts/{post_id}/comments", headers=author_headers).json()
    assert [c["body"] for c in comments] == ["Amen"]
    types = sorted(n["type"] for n in _notifications(client, author_headers))
    assert types == ["comment", "follow"]


def test_blank_comment_is_rejected(client: TestClient, make_user, make_post, auth_headers) -> None:
    author = make_user()
    post = make_post(author)

    response = client.post(
        f"/posts/{post.id}/comment", json={"content": "   "}, headers=auth_headers(author)
    )

    assert response.status_code == 400


def test_campaign_update_notifies_owner(client: TestClient, make_user, auth_headers) -> None:
    owner = make_user()
    supporter = make_user("Ruth")
    owner_headers = auth_headers(owner)

    campaign = client.post("/campaigns/", json={"title": "Roof Repair"}, headers=owner_headers)
    assert campaign.status_code == 201
    assert campaign.json()["slug"] == "roof-repair"

    update = client.post(
        f"/campaigns/{campaign.json()['id']}/updates",
        json={"content": "Shared with my small group"},
        headers=auth_headers(supporter),
    )
    assert update.status_code == 201

    (notification,) = _notifications(client, owner_headers)
    assert notification["type"] == "campaign_update"
    assert notification["message"] == "Ruth posted an update on your campaign 'Roof Repair'"


def test_ministry_flow(client: TestClient, make_user, auth_headers) -> None:
    owner = make_user()
    followers = [make_user() for _ in range(2)]
    owner_headers = auth_headers(owner)

    ministry = client.post("/ministries/", json={"name": "Youth"}, headers=owner_headers).json()
    for follower in followers:
        response = client.post(
            f"/ministries/{ministry['id']}/follow", headers=auth_headers(follower)
        )
        assert response.json()["created"] is True

    published = client.post(
        f"/ministries/{ministry['id']}/posts",
        json={"title": "Camp", "content": "Sign up now"},
        headers=owner_headers,
    )
    assert published.status_code == 201
    assert published.json()["notified"] == 2
    assert published.json()["post"]["ministry_id"] == ministry["id"]

    event = client.post(
        f"/ministries/{ministry['id']}/events",
        json={"title": "Worship night", "start_date": "2030-06-01T19:00:00"},
        headers=owner_headers,
    )
    assert event.status_code == 201

    rsvp = client.post(
        f"/ministries/events/{event.json()['id']}/rsvp", headers=auth_headers(followers[0])
    )
    assert rsvp.status_code == 200
    assert rsvp.json()["notification_id"] is not None

    owner_types = sorted(n["type"] for n in _notifications(client, owner_headers))
    assert owner_types == ["follow", "follow", "rsvp"]

    unfollow = client.delete(
        f"/ministries/{ministry['id']}/follow", headers=auth_headers(followers[1])
    )
    assert unfollow.json() == {"removed": True}


def test_only_the_owner_posts_for_a_ministry(client: TestClient, make_user, auth_headers) -> None:
    owner = make_user()
    stranger = make_user()
    ministry = client.post(
        "/ministries/", json={"name": "Youth"}, headers=auth_headers(owner)
    ).json()

    response = client.post(
        f"/ministries/{ministry['id']}/posts",
        json={"title": "Hijack", "content": "..."},
        headers=auth_headers(stranger),
    )

    assert response.status_code == 403


def test_chat_messages(client: TestClient, make_user, auth_headers) -> None:
    sender = make_user("Anna")
    recipient = make_user()
    outsider = make_user()
    sender_headers = auth_headers(sender)

    chat = client.post("/chats/", json={"other_user_id": recipient.id}, headers=sender_headers)
    assert chat.status_code == 200
    chat_id = chat.json()["id"]

    sent = client.post(
        f"/chats/{chat_id}/messages", json={"content": "Hi there"}, headers=sender_headers
    )
    assert sent.status_code == 201

    (notification,) = _notifications(client, auth_headers(recipient))
    assert notification["type"] == "message"
    assert notification["related_type"] == "chat"

    messages = client.get(f"/chats/{chat_id}/messages", headers=auth_headers(recipient))
    assert [m["body"] for m in messages.json()] == ["Hi there"]

    intruder_post = client.post(
        f"/chats/{chat_id}/messages", json={"content": "Hello?"}, headers=auth_headers(outsider)
    )
    intruder_read = client.get(f"/chats/{chat_id}/messages", headers=auth_headers(outsider))
    assert intruder_post.status_code == 403
    assert intruder_read.status_code == 403
