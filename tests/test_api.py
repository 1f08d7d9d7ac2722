import asyncio
from unittest.mock import AsyncMock

import httpx
import pytest
from fastapi.testclient import TestClient
from langchain_core.messages import AIMessage

from app.main import app, get_workspace


@pytest.fixture
def client(workspace):
    async def _current_workspace():
        return workspace

    app.dependency_overrides[get_workspace] = _current_workspace
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestHealth:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}


class TestChatRoutes:
    def test_chat_round_trip(self, client):
        resp = client.post("/chat", json={"message": "Hello"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["reply"]["role"] == "model"
        assert [m["role"] for m in body["messages"]] == ["user", "model"]

        assert client.delete("/chat").json() == {"messages": []}
        assert client.get("/state").json()["messages"] == []

    def test_blank_message_rejected(self, client):
        assert client.post("/chat", json={"message": "  "}).status_code == 422


class TestViewRoutes:
    def test_switch_view(self, client):
        assert client.post("/view", json={"view": "TASKS"}).json() == {"active_view": "TASKS"}
        assert client.get("/state").json()["active_view"] == "TASKS"

    def test_unknown_view(self, client):
        assert client.post("/view", json={"view": "SETTINGS"}).status_code == 422


class TestFileRoutes:
    def test_upload_summarize_remove(self, client, llm):
        llm.ainvoke = AsyncMock(return_value=AIMessage(content="- point one"))
        client.post("/files", json={"name": "a.txt", "content": "first"})
        body = client.post("/files", json={"name": "b.txt", "content": "second", "type": "text/plain"}).json()
        assert body["active_file"]["name"] == "b.txt"
        assert body["preview"] == "second"

        body = client.post("/files/summarize").json()
        assert body["summary"] == "- point one"

        body = client.delete("/files").json()
        assert body["active_file"] is None
        assert body["summary"] is None

    def test_summarize_without_file(self, client):
        assert client.post("/files/summarize").status_code == 404


class TestNoteRoutes:
    def test_notes_lifecycle(self, client):
        first = client.post("/notes", json={"title": "One", "content": "a"}).json()["note"]
        client.post("/notes", json={"title": "Two", "content": "b"})

        body = client.post("/notes/summarize").json()
        assert body["summary"] == "Sure, here you go."
        assert client.delete("/notes/summary").json() == {"summary": None}

        notes = client.delete(f"/notes/{first['id']}").json()["notes"]
        assert [n["title"] for n in notes] == ["Two"]
        assert client.delete(f"/notes/{first['id']}").status_code == 404

    def test_blank_note_rejected(self, client):
        assert client.post("/notes", json={"title": "x", "content": ""}).status_code == 422


class TestTaskRoutes:
    def test_manual_tasks(self, client):
        task = client.post("/tasks", json={"title": "Stretch", "category": "health"}).json()["task"]
        assert task["category"] == "health"

        toggled = client.post(f"/tasks/{task['id']}/toggle").json()["task"]
        assert toggled["completed"] is True

        assert client.delete(f"/tasks/{task['id']}").json() == {"tasks": []}
        assert client.post(f"/tasks/{task['id']}/toggle").status_code == 404

    def test_plan_flow(self, client, llm):
        llm.ainvoke = AsyncMock(return_value=AIMessage(content="1. Book venue\n2. **Send invites**"))

        body = client.post("/tasks/plan", json={"goal": "Throw a party"}).json()
        assert body["goal"] == "Throw a party"

        created = client.post("/tasks/plan/accept").json()["created"]
        assert [t["title"] for t in created] == ["Book venue", "Send invites"]
        assert client.post("/tasks/plan/accept").status_code == 404

    def test_discard_plan(self, client):
        client.post("/tasks/plan", json={"goal": "Move house"})
        assert client.delete("/tasks/plan").json() == {"plan": None}
        assert client.get("/tasks").json()["plan"] is None


@pytest.fixture
def served_workspace(workspace):
    async def _current_workspace():
        return workspace

    app.dependency_overrides[get_workspace] = _current_workspace
    yield workspace
    app.dependency_overrides.clear()


def _async_client():
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test")


class TestConcurrentRequests:
    @pytest.mark.asyncio
    async def test_concurrent_task_creation_keeps_every_task(self, served_workspace):
        async with _async_client() as client:
            responses = await asyncio.gather(
                *(client.post("/tasks", json={"title": f"task {i}"}) for i in range(300))
            )

        assert all(r.status_code == 200 for r in responses)
        titles = {t.title for t in served_workspace.snapshot().tasks}
        assert titles == {f"task {i}" for i in range(300)}

    @pytest.mark.asyncio
    async def test_busy_view_returns_conflict(self, served_workspace, llm):
        release = asyncio.Event()

        async def slow(*args, **kwargs):
            await release.wait()
            return AIMessage(content="- Step one")

        llm.ainvoke = AsyncMock(side_effect=slow)

        async with _async_client() as client:
            first = asyncio.create_task(client.post("/tasks/plan", json={"goal": "Run a 10k"}))
            for _ in range(200):
                if served_workspace.tasks.is_loading:
                    break
                await asyncio.sleep(0.01)
            assert served_workspace.tasks.is_loading

            second = await client.post("/tasks/plan", json={"goal": "Another goal"})
            assert second.status_code == 409

            release.set()
            assert (await first).json()["plan"] == "- Step one"
