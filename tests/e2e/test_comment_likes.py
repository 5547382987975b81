"""End-to-end tests for comment like endpoints."""

import pytest
from fastapi.testclient import TestClient

from tewahed.config import Settings
from tewahed.domain.repository import DiscussionRootRepository
from tewahed.domain.service import JWTService
from tewahed.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def container():
    return build_test_container()


@pytest.fixture
def client(container):
    with TestClient(create_app(container)) as test_client:
        yield test_client


@pytest.fixture
def comment_id(client, container) -> int:
    """A comment on question 1 posted by alice."""
    roots = client.portal.call(container.get, DiscussionRootRepository)
    roots.add_question(1)
    _sign_in(client, "alice")
    response = client.post("/comments", json={"content": "Hello", "question_id": 1})
    client.cookies.clear()
    return response.json()["comment_id"]


def _sign_in(client: TestClient, user_id: str) -> None:
    token = JWTService(Settings().auth).create_token(user_id)
    client.cookies.set("auth_token", token)


class TestCommentLikeEndpoints:
    """End-to-end tests for /comments/{id}/like."""

    def test_toggle(self, client, comment_id):
        _sign_in(client, "bob")

        first = client.post(f"/comments/{comment_id}/like/toggle")
        second = client.post(f"/comments/{comment_id}/like/toggle")

        assert first.status_code == 200
        assert first.json() == {"comment_id": comment_id, "liked": True, "like_count": 1}
        assert second.json() == {
            "comment_id": comment_id,
            "liked": False,
            "like_count": 0,
        }

    def test_like_is_idempotent_and_visible_in_thread(self, client, comment_id):
        # Arrange
        _sign_in(client, "bob")

        # Act
        client.post(f"/comments/{comment_id}/like")
        again = client.post(f"/comments/{comment_id}/like")
        _sign_in(client, "carol")
        client.post(f"/comments/{comment_id}/like")

        # Assert
        assert again.status_code == 200
        assert again.json()["like_count"] == 1

        status = client.get(f"/comments/{comment_id}/like").json()
        assert status == {"comment_id": comment_id, "like_count": 2, "is_liked": True}

        thread = client.get("/questions/1/comments").json()
        assert thread["comments"][0]["like_count"] == 2
        assert thread["comments"][0]["is_liked"] is True

    def test_anonymous_status(self, client, comment_id):
        response = client.get(f"/comments/{comment_id}/like")

        assert response.status_code == 200
        assert response.json()["is_liked"] is False

    def test_unlike_without_like_is_not_found(self, client, comment_id):
        _sign_in(client, "bob")

        response = client.delete(f"/comments/{comment_id}/like")

        assert response.status_code == 404

    def test_unlike_after_like(self, client, comment_id):
        _sign_in(client, "bob")
        client.post(f"/comments/{comment_id}/like")

        response = client.delete(f"/comments/{comment_id}/like")

        assert response.status_code == 200
        assert response.json()["like_count"] == 0

    def test_like_requires_authentication(self, client, comment_id):
        response = client.post(f"/comments/{comment_id}/like/toggle")

        assert response.status_code == 401

    def test_like_missing_comment(self, client):
        _sign_in(client, "bob")

        response = client.post("/comments/999/like")

        assert response.status_code == 404

    def test_invalid_token_counts_as_anonymous(self, client, comment_id):
        client.cookies.set("auth_token", "not-a-jwt")

        response = client.post(f"/comments/{comment_id}/like")

        assert response.status_code == 401
