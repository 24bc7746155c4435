"""
Tests for the /review endpoints.

Lifecycle tests run against in-memory SQLite; failure-mode tests
use AsyncMock repositories to control the data layer.
"""

from fastapi.testclient import TestClient

from catalog_api.domain.catalog.outcome import Failure, NotFound, Ok

REVIEW = {
    "product_id": 1,
    "reviewer": "Dana",
    "rating": 4,
    "content": "Crisp and fresh.",
}


class TestReviewLifecycle:
    """Create, read, update and delete against a real repository."""

    def test_empty_store_lists_empty_array(self, client: TestClient) -> None:
        """An empty review store is a legitimate 200 with []."""
        response = client.get("/review")
        assert response.status_code == 200
        assert response.json() == []

    def test_create_then_get(self, client: TestClient) -> None:
        created = client.post("/review", json=REVIEW)
        assert created.status_code == 201
        body = created.json()
        assert body["id"] >= 1

        fetched = client.get(f"/review/{body['id']}")
        assert fetched.status_code == 200
        assert fetched.json() == {**REVIEW, "id": body["id"]}

    def test_update_then_get(self, client: TestClient) -> None:
        review_id = client.post("/review", json=REVIEW).json()["id"]
        changed = {**REVIEW, "rating": 2, "content": "Bruised this time."}

        updated = client.put(f"/review/{review_id}", json=changed)
        assert updated.status_code == 200
        assert updated.json() == {"result": {**changed, "id": review_id}}

        assert client.get(f"/review/{review_id}").json()["rating"] == 2

    def test_delete_then_get(self, client: TestClient) -> None:
        review_id = client.post("/review", json=REVIEW).json()["id"]

        deleted = client.delete(f"/review/{review_id}")
        assert deleted.status_code == 200
        assert deleted.json()["id"] == review_id

        missing = client.get(f"/review/{review_id}")
        assert missing.status_code == 404
        assert missing.json() == {"error": "Review Not Found"}

    def test_list_returns_created_reviews(self, client: TestClient) -> None:
        client.post("/review", json=REVIEW)
        client.post("/review", json={**REVIEW, "reviewer": "Lee"})

        reviewers = [r["reviewer"] for r in client.get("/review").json()]

        assert reviewers == ["Dana", "Lee"]

    def test_ids_not_reused_after_delete(self, client: TestClient) -> None:
        first = client.post("/review", json=REVIEW).json()["id"]
        client.delete(f"/review/{first}")

        second = client.post("/review", json=REVIEW).json()["id"]

        assert second != first


class TestMissingReview:
    """Status codes for ids that do not exist."""

    def test_get_missing_is_404(self, client: TestClient) -> None:
        assert client.get("/review/999").status_code == 404

    def test_delete_missing_is_404(self, client: TestClient) -> None:
        response = client.delete("/review/999")
        assert response.status_code == 404
        assert response.json() == {"error": "Review Not Found"}

    def test_update_missing_is_500(self, client: TestClient) -> None:
        """Update reports a missing review as a server error, unlike get/delete."""
        response = client.put("/review/999", json=REVIEW)
        assert response.status_code == 500
        assert response.json() == {"error": "Server Error - Could not update"}


class TestValidationGate:
    """Invalid bodies are rejected before the data layer is reached."""

    def test_invalid_create_never_reaches_repository(
        self, mock_client: TestClient, mock_repositories
    ) -> None:
        response = mock_client.post("/review", json={**REVIEW, "rating": 9})

        assert response.status_code == 400
        assert "rating" in response.json()["error"]
        mock_repositories.reviews.add.assert_not_awaited()

    def test_missing_field_is_400(self, mock_client: TestClient, mock_repositories) -> None:
        payload = {k: v for k, v in REVIEW.items() if k != "content"}

        response = mock_client.post("/review", json=payload)

        assert response.status_code == 400
        mock_repositories.reviews.add.assert_not_awaited()

    def test_client_cannot_assign_id(self, mock_client: TestClient, mock_repositories) -> None:
        response = mock_client.post("/review", json={**REVIEW, "id": 7})

        assert response.status_code == 400
        mock_repositories.reviews.add.assert_not_awaited()

    def test_invalid_update_never_reaches_repository(
        self, mock_client: TestClient, mock_repositories
    ) -> None:
        response = mock_client.put("/review/1", json={**REVIEW, "reviewer": ""})

        assert response.status_code == 400
        mock_repositories.reviews.update.assert_not_awaited()

    def test_non_integer_id_is_400(self, mock_client: TestClient) -> None:
        response = mock_client.get("/review/abc")
        assert response.status_code == 400
        assert set(response.json()) == {"error"}


class TestDataLayerFailures:
    """Failure outcomes and raised faults from the repository."""

    def test_list_failure_is_500(self, mock_client: TestClient, mock_repositories) -> None:
        mock_repositories.reviews.list_all.return_value = Failure("db down")

        response = mock_client.get("/review")

        assert response.status_code == 500
        assert response.json() == {"error": "Server Error"}

    def test_create_failure_is_500(self, mock_client: TestClient, mock_repositories) -> None:
        mock_repositories.reviews.add.return_value = Failure("constraint violated")

        response = mock_client.post("/review", json=REVIEW)

        assert response.status_code == 500
        assert "constraint" not in response.text

    def test_get_uses_sentinel_envelope(
        self, mock_client: TestClient, mock_repositories
    ) -> None:
        """A collaborator returning {error: {code: 0}} is a 404."""
        mock_repositories.reviews.get.return_value = {"error": {"code": 0, "message": ""}}

        assert mock_client.get("/review/5").status_code == 404

    def test_raised_fault_becomes_json_500(
        self, mock_client: TestClient, mock_repositories
    ) -> None:
        mock_repositories.reviews.get.side_effect = ConnectionResetError("socket closed")

        response = mock_client.get("/review/5")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal Server Error"}
        assert "socket" not in response.text

    def test_raised_fault_on_write_becomes_json_500(
        self, mock_client: TestClient, mock_repositories
    ) -> None:
        mock_repositories.reviews.delete.side_effect = RuntimeError("lost connection")

        response = mock_client.delete("/review/5")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal Server Error"}

    def test_delete_failure_is_500(self, mock_client: TestClient, mock_repositories) -> None:
        mock_repositories.reviews.delete.return_value = Failure("deadlock")

        assert mock_client.delete("/review/5").status_code == 500

    def test_update_not_found_outcome_is_500(
        self, mock_client: TestClient, mock_repositories
    ) -> None:
        mock_repositories.reviews.update.return_value = NotFound()

        assert mock_client.put("/review/5", json=REVIEW).status_code == 500


class TestReviewCatchAll:
    """Unmatched methods and paths under /review."""

    def test_unknown_subpath(self, mock_client: TestClient) -> None:
        response = mock_client.get("/review/1/comments")

        assert response.status_code == 404
        assert response.json() == {
            "error": "The requested resource /review/1/comments was not found on this server."
        }

    def test_unsupported_method_on_collection(self, mock_client: TestClient) -> None:
        response = mock_client.delete("/review")
        assert response.status_code == 404
        assert "/review" in response.json()["error"]

    def test_unsupported_method_on_item(
        self, mock_client: TestClient, mock_repositories
    ) -> None:
        mock_repositories.reviews.get.return_value = Ok(None)

        response = mock_client.patch("/review/1", json=REVIEW)

        assert response.status_code == 404
        mock_repositories.reviews.update.assert_not_awaited()

    def test_trailing_slash_serves_collection(
        self, mock_client: TestClient, mock_repositories
    ) -> None:
        mock_repositories.reviews.list_all.return_value = Ok([])

        response = mock_client.get("/review/")

        assert response.status_code == 200
        assert response.json() == []
        mock_repositories.reviews.list_all.assert_awaited_once()

    def test_trailing_slash_create_keeps_body(self, client: TestClient) -> None:
        response = client.post("/review/", json=REVIEW)

        assert response.status_code == 201
        assert response.json()["reviewer"] == "Dana"

    def test_head_on_collection(self, mock_client: TestClient, mock_repositories) -> None:
        mock_repositories.reviews.list_all.return_value = Ok([])

        response = mock_client.head("/review")

        assert response.status_code == 200
        mock_repositories.reviews.list_all.assert_awaited_once()
