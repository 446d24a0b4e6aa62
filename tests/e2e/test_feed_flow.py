"""End-to-end tests for publishing news and reading feeds."""

import pytest
from fastapi.testclient import TestClient

from newsfeed.interface.api.app import create_app
from tests.conftest import author, reader, token_for
from tests.di import build_test_container

ADA = author(1, handle="ada")
BOB = reader(2, handle="bob")


@pytest.fixture
def client():
    """Create test client backed by in-memory persistence."""
    return TestClient(create_app(build_test_container()))


def publish(client, title, viewer=ADA):
    response = client.post(
        "/news",
        json={"title": title, "body": f"{title} body"},
        cookies={"auth_token": token_for(viewer)},
    )
    assert response.status_code == 201
    return response.json()


class TestHealth:
    """Health endpoint."""

    def test_health(self, client):
        """Should report the service as healthy."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestNewsEndpoints:
    """End-to-end tests for the news feed API.

    Note: These tests focus on the HTTP API interface layer.
    More detailed business logic tests are in unit tests.
    """

    def test_publish_and_page_through_feed(self, client):
        """Published news should page newest first with a cursor."""
        # Arrange
        ids = [publish(client, f"Story {i}")["id"] for i in range(3)]

        # Act
        first = client.get("/news", params={"page_size": 2}).json()
        second = client.get(
            "/news", params={"page_size": 2, "cursor": first["next_cursor"]}
        ).json()

        # Assert
        assert [item["id"] for item in first["items"]] == [ids[2], ids[1]]
        assert first["next_cursor"] == ids[1]
        assert [item["id"] for item in second["items"]] == [ids[0]]
        assert second["next_cursor"] is None

    def test_publish_requires_authentication(self, client):
        """Anonymous callers can't publish."""
        response = client.post("/news", json={"title": "Anonymous scoop"})

        assert response.status_code == 401
        assert "Authentication required" in response.json()["detail"]

    def test_publish_requires_verified_author(self, client):
        """Readers get 403 when publishing."""
        response = client.post(
            "/news",
            json={"title": "Hot take"},
            cookies={"auth_token": token_for(BOB)},
        )

        assert response.status_code == 403

    def test_invalid_token_is_anonymous_for_feeds(self, client):
        """An invalid token doesn't block reading the public feed."""
        publish(client, "Story")

        response = client.get("/news", cookies={"auth_token": "invalid-token"})

        assert response.status_code == 200
        assert response.json()["items"][0]["vote_state"] is None

    def test_unknown_sort_is_bad_request(self, client):
        """Sorts other than recency and score are rejected."""
        response = client.get("/news", params={"sort": "hot"})

        assert response.status_code == 400

    def test_negative_page_size_is_bad_request(self, client):
        """Negative page sizes are rejected."""
        response = client.get("/news", params={"page_size": -1})

        assert response.status_code == 400

    def test_get_missing_news(self, client):
        """Should return 404 for news that doesn't exist."""
        response = client.get("/news/999")

        assert response.status_code == 404

    def test_followed_feed(self, client):
        """Followers see only news by the authors they follow."""
        # Arrange
        grace = author(3, handle="grace")
        followed = publish(client, "Followed story")
        publish(client, "Other story", viewer=grace)
        follow = client.post(
            f"/authors/{ADA.user_id}/follow", cookies={"auth_token": token_for(BOB)}
        )

        # Act
        response = client.get(
            "/news", params={"followed": True}, cookies={"auth_token": token_for(BOB)}
        )

        # Assert
        assert follow.status_code == 200
        assert follow.json()["followers"] == 1
        assert [item["id"] for item in response.json()["items"]] == [followed["id"]]

    def test_followed_feed_needs_sign_in(self, client):
        """Anonymous callers can't ask for the followed feed."""
        response = client.get("/news", params={"followed": True})

        assert response.status_code == 401

    def test_author_feed(self, client):
        """An author's page lists their news; unknown authors are 404."""
        story = publish(client, "Story")

        found = client.get(f"/authors/{ADA.user_id}/news")
        missing = client.get("/authors/99/news")

        assert [item["id"] for item in found.json()["items"]] == [story["id"]]
        assert missing.status_code == 404

    def test_delete_news_leaves_tombstone(self, client):
        """Deleted news drops out of the feed but stays fetchable."""
        # Arrange
        story = publish(client, "Story")

        # Act
        deleted = client.delete(
            f"/news/{story['id']}", cookies={"auth_token": token_for(ADA)}
        )
        feed = client.get("/news").json()
        fetched = client.get(f"/news/{story['id']}").json()

        # Assert
        assert deleted.status_code == 200
        assert feed["items"] == []
        assert fetched["deleted"] is True
        assert fetched["title"] == "[deleted]"

    def test_edit_by_other_author_forbidden(self, client):
        """Only the author may edit their news."""
        story = publish(client, "Story")

        response = client.patch(
            f"/news/{story['id']}",
            json={"title": "Hijacked"},
            cookies={"auth_token": token_for(author(3))},
        )

        assert response.status_code == 403

    def test_ingest_is_idempotent(self, client):
        """Replaying an ingest batch skips known articles."""
        batch = {
            "articles": [{"external_id": "wire-1", "title": "Wire story"}],
            "source_cursor": "next-page",
        }
        cookies = {"auth_token": token_for(ADA)}

        first = client.post("/news/ingest", json=batch, cookies=cookies).json()
        again = client.post("/news/ingest", json=batch, cookies=cookies).json()

        assert len(first["created"]) == 1
        assert first["source_cursor"] == "next-page"
        assert again["created"] == []
        assert again["skipped"] == 1

    def test_origin_filter(self, client):
        """The home feed can list only written or only ingested news."""
        # Arrange
        story = publish(client, "Story")
        client.post(
            "/news/ingest",
            json={"articles": [{"external_id": "wire-1", "title": "Wire story"}]},
            cookies={"auth_token": token_for(ADA)},
        )

        # Act
        created = client.get("/news", params={"origin": "created"}).json()
        ingested = client.get("/news", params={"origin": "ingested"}).json()
        unknown = client.get("/news", params={"origin": "reddit"})

        # Assert
        assert [item["id"] for item in created["items"]] == [story["id"]]
        assert [item["title"] for item in ingested["items"]] == ["Wire story"]
        assert ingested["items"][0]["origin"] == "ingested"
        assert unknown.status_code == 400
