"""
CodeNotes Backend — HTTP API Tests
====================================

What:  Endpoint tests for /api/notes/{code}, /api/codes/random, and /health.
How:   HTTPX AsyncClient over ASGITransport against a fresh app per test.

What we test:
    ✅ Status codes: 200 list, 201 create, 400 validation, 200 idempotent delete
    ✅ Response shapes: {"notes": [...]}, {"note": {...}}, {"success": true}
    ✅ Error body format and request ID propagation
    ✅ Code isolation over HTTP
"""

import logging

import pytest


class TestListEndpoint:

    @pytest.mark.asyncio
    async def test_unknown_code_returns_empty_list(self, test_client):
        response = await test_client.get("/api/notes/never-seen")

        assert response.status_code == 200
        assert response.json() == {"notes": []}
        assert response.headers["X-Total-Count"] == "0"

    @pytest.mark.asyncio
    async def test_newest_sort(self, test_client):
        await test_client.post("/api/notes/c", json={"content": "first"})
        await test_client.post("/api/notes/c", json={"content": "second"})

        response = await test_client.get("/api/notes/c", params={"sort": "newest"})

        notes = response.json()["notes"]
        timestamps = [n["timestamp"] for n in notes]
        assert timestamps == sorted(timestamps, reverse=True)
        assert response.headers["X-Total-Count"] == "2"

    @pytest.mark.asyncio
    async def test_invalid_sort_rejected(self, test_client):
        response = await test_client.get("/api/notes/c", params={"sort": "sideways"})

        assert response.status_code == 422
        body = response.json()
        assert body["error"] == "request_validation_error"
        assert body["message"] == "Request validation failed"
        assert body["details"]["errors"][0]["loc"] == ["query", "sort"]
        assert body["request_id"] == response.headers["X-Request-ID"]


class TestCreateEndpoint:

    @pytest.mark.asyncio
    async def test_create_returns_201_with_note(self, test_client, sample_note_data):
        response = await test_client.post("/api/notes/x7", json=sample_note_data)

        assert response.status_code == 201
        note = response.json()["note"]
        assert note["content"] == "buy milk"
        assert note["title"] == "todo"
        assert isinstance(note["timestamp"], int)
        assert note["id"]

    @pytest.mark.asyncio
    async def test_title_defaults_to_empty_string(self, test_client):
        response = await test_client.post("/api/notes/c", json={"content": "body"})

        assert response.status_code == 201
        assert response.json()["note"]["title"] == ""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [{"content": ""}, {"title": "only a title"}, {"content": None}])
    async def test_missing_content_is_400(self, test_client, body):
        response = await test_client.post("/api/notes/c", json=body)

        assert response.status_code == 400
        payload = response.json()
        assert payload["error"] == "validation_error"
        assert payload["message"] == "Content is required"
        assert payload["details"] == {"field": "content"}

        listing = await test_client.get("/api/notes/c")
        assert listing.json() == {"notes": []}

    @pytest.mark.asyncio
    async def test_missing_body_is_400(self, test_client):
        response = await test_client.post("/api/notes/c")

        assert response.status_code == 400
        payload = response.json()
        assert payload["error"] == "validation_error"
        assert payload["details"] == {"field": "content"}

    @pytest.mark.asyncio
    async def test_malformed_json_uses_error_format(self, test_client):
        response = await test_client.post(
            "/api/notes/c",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 422
        payload = response.json()
        assert payload["error"] == "request_validation_error"
        assert payload["details"]["errors"]
        assert payload["request_id"] == response.headers["X-Request-ID"]


class TestDeleteEndpoint:

    @pytest.mark.asyncio
    async def test_delete_by_query_param(self, test_client):
        created = await test_client.post("/api/notes/c", json={"content": "a"})
        note_id = created.json()["note"]["id"]

        response = await test_client.delete("/api/notes/c", params={"id": note_id})

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert (await test_client.get("/api/notes/c")).json() == {"notes": []}

    @pytest.mark.asyncio
    async def test_delete_by_path_segment(self, test_client):
        created = await test_client.post("/api/notes/c", json={"content": "a"})
        note_id = created.json()["note"]["id"]

        response = await test_client.delete(f"/api/notes/c/{note_id}")

        assert response.status_code == 200
        assert (await test_client.get("/api/notes/c")).json() == {"notes": []}

    @pytest.mark.asyncio
    async def test_delete_unknown_id_is_success(self, test_client):
        response = await test_client.delete("/api/notes/c", params={"id": "does-not-exist"})

        assert response.status_code == 200
        assert response.json() == {"success": True}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("params", [{}, {"id": ""}])
    async def test_delete_without_id_is_400(self, test_client, params):
        response = await test_client.delete("/api/notes/c", params=params)

        assert response.status_code == 400
        assert response.json()["details"] == {"field": "id"}


class TestScenario:

    @pytest.mark.asyncio
    async def test_create_list_delete(self, test_client, sample_note_data):
        created = await test_client.post("/api/notes/x7", json=sample_note_data)
        note = created.json()["note"]

        listing = await test_client.get("/api/notes/x7")
        assert listing.json() == {"notes": [note]}

        deleted = await test_client.delete("/api/notes/x7", params={"id": note["id"]})
        assert deleted.json() == {"success": True}

        assert (await test_client.get("/api/notes/x7")).json() == {"notes": []}

    @pytest.mark.asyncio
    async def test_codes_are_isolated(self, test_client):
        await test_client.post("/api/notes/abc", json={"content": "only for abc"})

        response = await test_client.get("/api/notes/xyz")

        assert response.json() == {"notes": []}


class TestAmbientEndpoints:

    @pytest.mark.asyncio
    async def test_random_code(self, test_client):
        response = await test_client.get("/api/codes/random")

        assert response.status_code == 200
        code = response.json()["code"]
        assert len(code) == 8
        assert code.isalnum() and code == code.lower()

    @pytest.mark.asyncio
    async def test_health_reports_store_size(self, test_client):
        await test_client.post("/api/notes/a", json={"content": "1"})
        await test_client.post("/api/notes/a", json={"content": "2"})
        await test_client.post("/api/notes/b", json={"content": "3"})

        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["collections"] == 2
        assert body["notes"] == 3

    @pytest.mark.asyncio
    async def test_health_is_not_access_logged(self, test_client, caplog):
        with caplog.at_level(logging.INFO, logger="codenotes.access"):
            await test_client.get("/health")
            await test_client.get("/api/notes/c")

        lines = [r.getMessage() for r in caplog.records if r.name == "codenotes.access"]
        assert len(lines) == 1
        assert lines[0].startswith("GET /api/notes/c 200")

    @pytest.mark.asyncio
    async def test_request_id_is_echoed(self, test_client):
        response = await test_client.get("/api/notes/c", headers={"X-Request-ID": "abc12345"})
        assert response.headers["X-Request-ID"] == "abc12345"

    @pytest.mark.asyncio
    async def test_request_id_generated_and_in_error_body(self, test_client):
        response = await test_client.post("/api/notes/c", json={"content": ""})

        rid = response.headers["X-Request-ID"]
        assert len(rid) == 8
        assert response.json()["request_id"] == rid

    @pytest.mark.asyncio
    async def test_apps_do_not_share_notes(self, test_client):
        from httpx import AsyncClient, ASGITransport
        from codenotes.main import create_app

        await test_client.post("/api/notes/c", json={"content": "mine"})

        async with AsyncClient(transport=ASGITransport(app=create_app()), base_url="http://test") as other:
            response = await other.get("/api/notes/c")

        assert response.json() == {"notes": []}
