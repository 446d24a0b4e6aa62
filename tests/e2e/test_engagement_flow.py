"""End-to-end tests for comments, votes and saves."""

import pytest
from fastapi.testclient import TestClient

from newsfeed.interface.api.app import create_app
from tests.conftest import author, reader, token_for
from tests.di import build_test_container

ADA = author(1, handle="ada")
BOB = reader(2, handle="bob")
CAROL = reader(3, handle="carol")


@pytest.fixture
def client():
    """Create test client backed by in-memory persistence."""
    return TestClient(create_app(build_test_container()))


def auth(viewer):
    return {"auth_token": token_for(viewer)}


@pytest.fixture
def news_id(client):
    response = client.post("/news", json={"title": "Story"}, cookies=auth(ADA))
    return response.json()["id"]


def comment(client, viewer, parent_id, parent_type, body="Nice"):
    response = client.post(
        "/comments",
        json={"parent_id": parent_id, "parent_type": parent_type, "body": body},
        cookies=auth(viewer),
    )
    assert response.status_code == 201
    return response.json()


class TestCommentEndpoints:
    """End-to-end tests for threads."""

    def test_thread_and_replies(self, client, news_id):
        """Comments and replies are listed under their parents and counted."""
        # Arrange
        top = comment(client, BOB, news_id, "news")
        reply = comment(client, CAROL, top["id"], "comment", body="Agreed")

        # Act
        thread = client.get(f"/news/{news_id}/comments").json()
        replies = client.get(f"/comments/{top['id']}/replies").json()
        news = client.get(f"/news/{news_id}").json()

        # Assert
        assert [c["id"] for c in thread["items"]] == [top["id"]]
        assert thread["items"][0]["reply_count"] == 1
        assert [c["id"] for c in replies["items"]] == [reply["id"]]
        assert news["reply_count"] == 2

    def test_comment_requires_authentication(self, client, news_id):
        """Anonymous callers can't comment."""
        response = client.post(
            "/comments",
            json={"parent_id": news_id, "parent_type": "news", "body": "Hi"},
        )

        assert response.status_code == 401

    def test_comment_on_missing_parent(self, client):
        """Commenting on a missing comment is a 404."""
        response = client.post(
            "/comments",
            json={"parent_id": 77, "parent_type": "comment", "body": "Hi"},
            cookies=auth(BOB),
        )

        assert response.status_code == 404

    def test_delete_comment_with_reply(self, client, news_id):
        """A removed comment with replies stays in the thread as a tombstone."""
        # Arrange
        top = comment(client, BOB, news_id, "news")
        comment(client, CAROL, top["id"], "comment")

        # Act
        deleted = client.delete(f"/comments/{top['id']}", cookies=auth(BOB))
        thread = client.get(f"/news/{news_id}/comments").json()

        # Assert
        assert deleted.status_code == 200
        assert deleted.json()["tombstone"]["deleted"] is True
        assert thread["items"][0]["id"] == top["id"]
        assert thread["items"][0]["body"] == "[deleted]"

    def test_edit_by_other_user_forbidden(self, client, news_id):
        """Only the comment author may edit it."""
        top = comment(client, BOB, news_id, "news")

        response = client.patch(
            f"/comments/{top['id']}", json={"body": "Edited"}, cookies=auth(CAROL)
        )

        assert response.status_code == 403


class TestVoteEndpoints:
    """End-to-end tests for likes and dislikes."""

    def test_like_toggle(self, client, news_id):
        """Liking twice cancels; the feed reflects the viewer's state."""
        # Act
        liked = client.post(
            f"/news/{news_id}/vote", json={"kind": "like"}, cookies=auth(BOB)
        ).json()
        feed = client.get("/news", cookies=auth(BOB)).json()
        cancelled = client.post(
            f"/news/{news_id}/vote", json={"kind": "like"}, cookies=auth(BOB)
        ).json()

        # Assert
        assert liked["likes"] == 1
        assert liked["vote_state"] == "like"
        assert liked["message"] == "Like added"
        assert feed["items"][0]["vote_state"] == "like"
        assert cancelled["likes"] == 0
        assert cancelled["vote_state"] == "none"
        assert cancelled["outcome"] == "removed"

    def test_dislike_comment(self, client, news_id):
        """Comments can be disliked."""
        top = comment(client, BOB, news_id, "news")

        response = client.post(
            f"/comments/{top['id']}/vote", json={"kind": "dislike"}, cookies=auth(CAROL)
        )

        assert response.status_code == 200
        assert response.json()["score"] == -1

    def test_vote_requires_authentication(self, client, news_id):
        """Anonymous callers can't vote."""
        response = client.post(f"/news/{news_id}/vote", json={"kind": "like"})

        assert response.status_code == 401

    def test_vote_on_missing_news(self, client):
        """Voting on news that doesn't exist is a 404."""
        response = client.post(
            "/news/404/vote", json={"kind": "like"}, cookies=auth(BOB)
        )

        assert response.status_code == 404

    def test_invalid_vote_kind(self, client, news_id):
        """Unknown vote kinds fail validation."""
        response = client.post(
            f"/news/{news_id}/vote", json={"kind": "love"}, cookies=auth(BOB)
        )

        assert response.status_code == 422


class TestSaveEndpoints:
    """End-to-end tests for saving items and the caller's own lists."""

    def test_saved_and_liked_lists(self, client, news_id):
        """Saved and liked items show up under /me."""
        # Arrange
        top = comment(client, BOB, news_id, "news")
        client.post(f"/news/{news_id}/save", json={"action": "save"}, cookies=auth(BOB))
        client.post(
            f"/comments/{top['id']}/vote", json={"kind": "like"}, cookies=auth(BOB)
        )

        # Act
        saved = client.get("/me/saved", cookies=auth(BOB)).json()
        liked = client.get("/me/liked", cookies=auth(BOB)).json()

        # Assert
        assert [(i["kind"], i["id"]) for i in saved["items"]] == [("news", news_id)]
        assert saved["items"][0]["save_state"] == "save"
        assert [(i["kind"], i["id"]) for i in liked["items"]] == [
            ("comment", top["id"])
        ]

    def test_double_save_rejected(self, client, news_id):
        """Saving an already saved item is a bad request."""
        client.post(f"/news/{news_id}/save", json={"action": "save"}, cookies=auth(BOB))

        response = client.post(
            f"/news/{news_id}/save", json={"action": "save"}, cookies=auth(BOB)
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid action"

    def test_liked_list_pages_with_record_cursor(self, client):
        """The liked list hands back a cursor that leads to older likes."""
        # Arrange
        ids = []
        for title in ("One", "Two", "Three"):
            story = client.post("/news", json={"title": title}, cookies=auth(ADA))
            ids.append(story.json()["id"])
            client.post(
                f"/news/{ids[-1]}/vote", json={"kind": "like"}, cookies=auth(BOB)
            )

        # Act
        first = client.get(
            "/me/liked", params={"page_size": 2}, cookies=auth(BOB)
        ).json()
        cursor = first["next_cursor"]
        second = client.get(
            "/me/liked",
            params={
                "page_size": 2,
                "cursor_id": cursor["id"],
                "cursor_created_at": cursor["created_at"],
            },
            cookies=auth(BOB),
        ).json()

        # Assert
        assert [i["id"] for i in first["items"]] == [ids[2], ids[1]]
        assert [i["id"] for i in second["items"]] == [ids[0]]
        assert second["next_cursor"] is None

    def test_half_cursor_rejected(self, client):
        """A liked-list cursor needs both its ID and its timestamp."""
        response = client.get("/me/liked", params={"cursor_id": 1}, cookies=auth(BOB))

        assert response.status_code == 400

    def test_lists_require_authentication(self, client):
        """The caller's own lists need a signed-in caller."""
        assert client.get("/me/saved").status_code == 401
        assert client.get("/me/following").status_code == 401

    def test_following_list(self, client, news_id):
        """Followed authors are listed with their counters."""
        client.post(f"/authors/{ADA.user_id}/follow", cookies=auth(BOB))

        response = client.get("/me/following", cookies=auth(BOB)).json()

        assert [a["author_id"] for a in response["authors"]] == [ADA.user_id]
        assert response["authors"][0]["handle"] == "ada"
        assert response["authors"][0]["written_news"] == 1

    def test_author_profile(self, client, news_id):
        """An author's profile shows counters and the caller's follow state."""
        # Arrange
        client.post(f"/authors/{ADA.user_id}/follow", cookies=auth(BOB))

        # Act
        follower = client.get(f"/authors/{ADA.user_id}", cookies=auth(BOB)).json()
        anonymous = client.get(f"/authors/{ADA.user_id}").json()
        missing = client.get("/authors/99")

        # Assert
        assert follower["handle"] == "ada"
        assert follower["followers"] == 1
        assert follower["written_news"] == 1
        assert follower["is_following"] is True
        assert anonymous["is_following"] is None
        assert missing.status_code == 404

    def test_follow_twice_rejected(self, client, news_id):
        """Following the same author twice is a bad request."""
        client.post(f"/authors/{ADA.user_id}/follow", cookies=auth(BOB))

        response = client.post(f"/authors/{ADA.user_id}/follow", cookies=auth(BOB))

        assert response.status_code == 400
