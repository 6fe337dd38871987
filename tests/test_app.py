# tests/test_app.py
import pytest
from fastapi import status
from fastapi.testclient import TestClient

from blog_api.app.core.context import ApiContext
from blog_api.app.main import create_app


def _documented_routes(app) -> set:
    return {
        (method.upper(), path)
        for path, operations in app.openapi()["paths"].items()
        for method in operations
    }


def test_all_routes_documented(app) -> None:
    assert _documented_routes(app) == {
        ("POST", "/api/posts"),
        ("GET", "/api/posts/{post_id}"),
        ("GET", "/api/posts/comments/{post_id}"),
        ("POST", "/api/posts/comments"),
    }


@pytest.mark.parametrize(
    "method, path, expected_status, expected_message",
    [
        ("POST", "/api/posts", status.HTTP_400_BAD_REQUEST, "400 Bad Request"),
        ("GET", "/api/posts/1", status.HTTP_404_NOT_FOUND, "Post with id: 1 does not exist"),
        ("POST", "/api/posts/comments", status.HTTP_400_BAD_REQUEST, "could not deserialize comment json payload"),
    ],
)
def test_routes_are_served_by_their_handlers(client, method, path, expected_status, expected_message) -> None:
    response = client.request(method, path, json={})

    assert response.status_code == expected_status
    assert response.json() == {"message": expected_message, "status": expected_status}


def test_comment_listing_route_is_served(client) -> None:
    response = client.get("/api/posts/comments/1")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == []


def test_create_app_uses_given_context() -> None:
    context = ApiContext()
    assert create_app(context).state.context is context


def test_each_app_gets_its_own_storage() -> None:
    first, second = create_app(), create_app()
    assert first.state.context is not second.state.context

    payload = {"id": 1, "title": "t", "content": "c", "creationDate": "2020-01-01T00:00:00Z"}
    with TestClient(first) as client:
        assert client.post("/api/posts", json=payload).status_code == status.HTTP_200_OK
    with TestClient(second) as client:
        assert client.get("/api/posts/1").status_code == status.HTTP_404_NOT_FOUND


def test_unknown_route_uses_envelope(client) -> None:
    response = client.get("/api/unknown")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.headers["content-type"] == "application/json"
    assert response.json() == {"message": "Not Found", "status": 404}


def test_wrong_method_uses_envelope(client) -> None:
    response = client.get("/api/posts")

    assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
    assert response.json() == {"message": "Method Not Allowed", "status": 405}
    assert "POST" in response.headers["allow"]
