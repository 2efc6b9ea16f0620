"""Tests for the project HTTP endpoints."""

from __future__ import annotations


class TestProjectRoutes:
    """Test the Project Routes."""

    async def test_list_empty(self, client) -> None:
        response = await client.get("/api/projects")

        assert response.status_code == 200
        assert response.json() == []

    async def test_save_returns_metadata(self, client) -> None:
        payload = {"name": "Landing", "layout": [{"type": "button"}, {"type": "text"}], "settings": {}}

        response = await client.post("/api/projects", json=payload)

        assert response.status_code == 200
        body = response.json()
        assert body["id"]
        assert body["name"] == "Landing"
        assert body["component_count"] == 2
        assert body["last_modified"] > 0

    async def test_save_without_name_uses_untitled(self, client) -> None:
        response = await client.post("/api/projects", json={"layout": []})

        assert response.json()["name"] == "Untitled"

    async def test_get_returns_full_document(self, client) -> None:
        saved = (await client.post("/api/projects", json={"id": "p1", "name": "A", "layout": []})).json()

        response = await client.get(f"/api/projects/{saved['id']}")

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == "p1"
        assert body["name"] == "A"
        assert body["layout"] == []

    async def test_get_missing_returns_404(self, client) -> None:
        response = await client.get("/api/projects/missing")

        assert response.status_code == 404

    async def test_save_overwrites_existing(self, client) -> None:
        await client.post("/api/projects", json={"id": "p1", "name": "A"})
        await client.post("/api/projects", json={"id": "p1", "name": "B"})

        listed = (await client.get("/api/projects")).json()

        assert [item["name"] for item in listed] == ["B"]

    async def test_list_newest_first(self, client, monkeypatch) -> None:
        stamps = iter([1000.0, 2000.0])
        monkeypatch.setattr("studio.db.store.now_ms", lambda: next(stamps))
        await client.post("/api/projects", json={"id": "old", "name": "Old"})
        await client.post("/api/projects", json={"id": "new", "name": "New"})

        listed = (await client.get("/api/projects")).json()

        assert [item["id"] for item in listed] == ["new", "old"]

    async def test_delete(self, client) -> None:
        await client.post("/api/projects", json={"id": "p1", "name": "A"})

        response = await client.delete("/api/projects/p1")

        assert response.status_code == 204
        assert (await client.get("/api/projects/p1")).status_code == 404

    async def test_delete_missing_returns_404(self, client) -> None:
        response = await client.delete("/api/projects/missing")

        assert response.status_code == 404

    async def test_save_persist_failure_returns_500(self, client, stores, fail_writes) -> None:
        fail_writes(stores.projects)

        response = await client.post("/api/projects", json={"id": "p1", "name": "A"})

        assert response.status_code == 500
        assert (await client.get("/api/projects/p1")).status_code == 404

    async def test_delete_persist_failure_keeps_project(self, client, stores, fail_writes) -> None:
        await client.post("/api/projects", json={"id": "p1", "name": "A"})
        fail_writes(stores.projects)

        response = await client.delete("/api/projects/p1")

        assert response.status_code == 500
        assert (await client.get("/api/projects/p1")).json()["name"] == "A"
