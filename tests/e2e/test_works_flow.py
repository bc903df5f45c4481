"""End-to-end tests for the work catalog."""

from uuid import uuid4

import pytest

from tests.harness import create_client_fixture

client = create_client_fixture()


def _work_count(client) -> int:
    return client.get("/works").json()["total"]


def _create(client, title: str, category: str) -> str:
    response = client.post("/works", json={"title": title, "category": category})
    assert response.status_code == 302
    return response.headers["location"].rsplit("/", 1)[-1]


class TestRankings:
    """The home page."""

    def test_empty_catalog_renders(self, client):
        """200 with every category present even when nothing exists."""
        response = client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["spotlight"] is None
        assert data["categories"] == {"album": [], "book": [], "movie": []}

    def test_spotlight_and_categories(self, client):
        """Works show up under their category."""
        _create(client, "Dune", "book")
        _create(client, "Heat", "movie")

        data = client.get("/", params={"limit": 5}).json()

        assert data["spotlight"]["title"] in {"Dune", "Heat"}
        assert [w["title"] for w in data["categories"]["book"]] == ["Dune"]
        assert [w["title"] for w in data["categories"]["movie"]] == ["Heat"]

    def test_invalid_limit_is_400(self, client):
        """Query validation failures are client errors."""
        assert client.get("/", params={"limit": 0}).status_code == 400


class TestCreateWork:
    """POST /works."""

    def test_create_redirects_to_new_work(self, client):
        """Valid works redirect to their page and the count grows by one."""
        before = _work_count(client)

        response = client.post(
            "/works", json={"title": "test work", "category": "movie"}
        )

        assert response.status_code == 302
        location = response.headers["location"]
        assert location.startswith("/works/")
        assert client.get(location).json()["title"] == "test work"
        assert _work_count(client) == before + 1

    @pytest.mark.parametrize("category", ["album", "book", "movie"])
    def test_empty_title_is_400_for_every_category(self, client, category):
        """Empty titles fail and nothing is created."""
        response = client.post("/works", json={"title": "", "category": category})

        assert response.status_code == 400
        assert _work_count(client) == 0

    @pytest.mark.parametrize(
        "category",
        ["albumstrailingtext", "Album", "MOVIE", "books", "", "   ", " book"],
    )
    def test_inexact_category_is_400(self, client, category):
        """Only exact category names are accepted."""
        response = client.post("/works", json={"title": "x", "category": category})

        assert response.status_code == 400
        assert _work_count(client) == 0

    def test_missing_fields_are_400(self, client):
        """An empty body is a validation failure, not a server error."""
        assert client.post("/works", json={}).status_code == 400
        assert _work_count(client) == 0

    def test_malformed_body_is_400(self, client):
        """Type errors in the body are reported as 400."""
        response = client.post(
            "/works",
            json={"title": "x", "category": "book", "publication_year": "soon"},
        )

        assert response.status_code == 400


class TestListWorks:
    """GET /works."""

    def test_filter_by_category(self, client):
        _create(client, "Dune", "book")
        _create(client, "Heat", "movie")

        data = client.get("/works", params={"category": "book"}).json()

        assert data["total"] == 1
        assert data["category"] == "book"
        assert [w["title"] for w in data["works"]] == ["Dune"]

    def test_plural_filter_is_400(self, client):
        assert client.get("/works", params={"category": "books"}).status_code == 400


class TestShowAndEditWork:
    """GET /works/{id} and GET /works/{id}/edit."""

    def test_show_work(self, client):
        work_id = _create(client, "Heat", "movie")

        response = client.get(f"/works/{work_id}")

        assert response.status_code == 200
        data = response.json()
        assert data["category"] == "movie"
        assert data["vote_count"] == 0
        assert data["voters"] == []
        assert data["has_voted"] is False

    @pytest.mark.parametrize("work_id", [str(uuid4()), "12345"])
    def test_show_unknown_work_is_404(self, client, work_id):
        assert client.get(f"/works/{work_id}").status_code == 404

    def test_edit_form(self, client):
        work_id = _create(client, "Heat", "movie")

        response = client.get(f"/works/{work_id}/edit")

        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "Heat"
        assert data["categories"] == ["album", "book", "movie"]

    def test_edit_unknown_work_is_404(self, client):
        assert client.get(f"/works/{uuid4()}/edit").status_code == 404


class TestUpdateWork:
    """PATCH /works/{id}."""

    def test_update_redirects_and_persists_title(self, client):
        work_id = _create(client, "Heat", "movie")

        response = client.patch(f"/works/{work_id}", json={"title": "Heat (1995)"})

        assert response.status_code == 302
        assert response.headers["location"] == f"/works/{work_id}"
        data = client.get(f"/works/{work_id}").json()
        assert data["title"] == "Heat (1995)"
        assert data["category"] == "movie"

    def test_update_unknown_work_is_404(self, client):
        response = client.patch(f"/works/{uuid4()}", json={"title": "Anything"})

        assert response.status_code == 404

    def test_update_with_blank_title_is_404_and_keeps_title(self, client):
        work_id = _create(client, "Heat", "movie")

        response = client.patch(f"/works/{work_id}", json={"title": ""})

        assert response.status_code == 404
        assert client.get(f"/works/{work_id}").json()["title"] == "Heat"


class TestDeleteWork:
    """DELETE /works/{id}."""

    def test_delete_redirects_to_root(self, client):
        work_id = _create(client, "Heat", "movie")

        response = client.delete(f"/works/{work_id}")

        assert response.status_code == 302
        assert response.headers["location"] == "/"
        assert client.get(f"/works/{work_id}").status_code == 404
        assert _work_count(client) == 0

    def test_delete_unknown_work_is_404_and_deletes_nothing(self, client):
        _create(client, "Heat", "movie")
        before = _work_count(client)

        response = client.delete(f"/works/{uuid4()}")

        assert response.status_code == 404
        assert _work_count(client) == before


class TestHealth:
    """GET /health."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
