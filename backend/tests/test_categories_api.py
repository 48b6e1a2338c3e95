"""
Notes App Backend — Categories API Tests
==========================================

What:  /api/categories CRUD and the "category in use" rule.
"""

import pytest


class TestCategoryCrud:

    @pytest.mark.asyncio
    async def test_general_is_listed_by_default(self, test_client):
        response = await test_client.get("/api/categories")

        assert response.status_code == 200
        assert response.json() == [{"id": "general", "name": "General", "color": "#6c757d"}]

    @pytest.mark.asyncio
    async def test_create_update_delete(self, test_client):
        response = await test_client.post("/api/categories", json={"name": " Work "})
        assert response.status_code == 201
        category = response.json()
        assert category["name"] == "Work"
        assert category["color"] == "#6c757d"

        response = await test_client.put(
            f"/api/categories/{category['id']}", json={"name": "Office", "color": "#0000ff"}
        )
        assert response.status_code == 200
        assert response.json() == {"id": category["id"], "name": "Office", "color": "#0000ff"}

        response = await test_client.delete(f"/api/categories/{category['id']}")
        assert response.status_code == 204

        response = await test_client.get("/api/categories")
        assert [c["id"] for c in response.json()] == ["general"]

    @pytest.mark.asyncio
    async def test_name_required(self, test_client):
        response = await test_client.post("/api/categories", json={"color": "#fff"})

        assert response.status_code == 400
        assert response.json()["details"]["field"] == "name"

    @pytest.mark.asyncio
    async def test_missing_category(self, test_client):
        response = await test_client.put("/api/categories/missing", json={"name": "X"})
        assert response.status_code == 404

        response = await test_client.delete("/api/categories/missing")
        assert response.status_code == 404


class TestCategoryReferences:

    @pytest.mark.asyncio
    async def test_referenced_category_cannot_be_deleted(self, test_client):
        category = (await test_client.post("/api/categories", json={"name": "Ideas"})).json()
        note = (await test_client.post(
            "/api/notes",
            json={"title": "A", "content": "B", "categoryId": category["id"]},
        )).json()
        assert note["categoryId"] == category["id"]

        response = await test_client.delete(f"/api/categories/{category['id']}")
        assert response.status_code == 400
        assert response.json()["error"] == "conflict"

        await test_client.delete(f"/api/notes/{note['id']}")

        response = await test_client.delete(f"/api/categories/{category['id']}")
        assert response.status_code == 204

    @pytest.mark.asyncio
    async def test_moving_note_releases_category(self, test_client):
        category = (await test_client.post("/api/categories", json={"name": "Ideas"})).json()
        note = (await test_client.post(
            "/api/notes",
            json={"title": "A", "content": "B", "categoryId": category["id"]},
        )).json()

        response = await test_client.put(
            f"/api/notes/{note['id']}",
            json={"title": "A", "content": "B", "categoryId": "general"},
        )
        assert response.json()["categoryId"] == "general"

        response = await test_client.delete(f"/api/categories/{category['id']}")
        assert response.status_code == 204

    @pytest.mark.asyncio
    async def test_default_category_cannot_be_deleted(self, test_client):
        response = await test_client.delete("/api/categories/general")

        assert response.status_code == 400
        assert response.json()["error"] == "conflict"
