from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
import logging
from pydantic import BaseModel, Field

from assistant.controllers import ViewController, Workspace
from assistant.core.models import View
from config.settings import get_settings


settings = get_settings()
logging.basicConfig(
    level=settings.log_level.upper(),
    format="[%(asctime)s] %(levelname)s - %(message)s",
)
logger = logging.getLogger("taskai")

app = FastAPI(title="TaskAI Daily Assistant", version="1.0.0")

# CORS: allow local frontend during development
if settings.app_env.lower() in {"dev", "development", "local"}:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# Handlers are async so every state change runs on the event loop thread.
_workspace: Optional[Workspace] = None


async def get_workspace() -> Workspace:
    global _workspace
    if _workspace is None:
        _workspace = Workspace()
        logger.info(
            "Workspace created: model=%s key_set=%s",
            settings.gemini_model,
            bool(settings.google_api_key),
        )
    return _workspace


class ViewRequest(BaseModel):
    view: View


class ChatRequest(BaseModel):
    message: str = Field(..., description="User's latest message")


class FileRequest(BaseModel):
    name: str = Field(..., description="Original file name")
    content: str = Field(..., description="Full text content of the file")
    type: str = Field("", description="MIME type reported by the client")


class NoteRequest(BaseModel):
    title: str
    content: str


class TaskRequest(BaseModel):
    title: str
    category: Optional[str] = None


class PlanRequest(BaseModel):
    goal: str = Field(..., description="Goal to break down into tasks")


def _dump(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, (list, tuple)):
        return [_dump(v) for v in value]
    return value


def _require_text(value: str, field: str) -> None:
    if not value or not value.strip():
        raise HTTPException(status_code=422, detail=f"{field} must not be blank")


def _require_idle(controller: ViewController) -> None:
    if controller.is_loading:
        raise HTTPException(
            status_code=409,
            detail=f"The {controller.name} view is still waiting for a response",
        )


def _files_body(ws: Workspace) -> Dict[str, Any]:
    return {
        "active_file": _dump(ws.files.active_file),
        "preview": ws.files.preview,
        "summary": ws.files.summary,
        "status": ws.files.status.value,
    }


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.get("/state")
async def state(ws: Workspace = Depends(get_workspace)) -> Dict[str, Any]:
    body = ws.snapshot().model_dump(mode="json")
    body["active_view"] = ws.active_view.value
    return body


@app.post("/view")
async def switch_view(req: ViewRequest, ws: Workspace = Depends(get_workspace)) -> Dict[str, Any]:
    return {"active_view": ws.switch_view(req.view).value}


@app.post("/chat")
async def chat(req: ChatRequest, ws: Workspace = Depends(get_workspace)) -> Dict[str, Any]:
    _require_text(req.message, "message")
    _require_idle(ws.chat)
    reply = await ws.chat.send(req.message)
    return {"reply": _dump(reply), "messages": _dump(ws.snapshot().messages)}


@app.delete("/chat")
async def clear_chat(ws: Workspace = Depends(get_workspace)) -> Dict[str, Any]:
    ws.chat.clear()
    return {"messages": []}


@app.get("/files")
async def get_file(ws: Workspace = Depends(get_workspace)) -> Dict[str, Any]:
    return _files_body(ws)


@app.post("/files")
async def upload_file(req: FileRequest, ws: Workspace = Depends(get_workspace)) -> Dict[str, Any]:
    _require_text(req.name, "name")
    ws.files.upload(name=req.name, content=req.content, type=req.type)
    return _files_body(ws)


@app.delete("/files")
async def remove_file(ws: Workspace = Depends(get_workspace)) -> Dict[str, Any]:
    ws.files.remove()
    return _files_body(ws)


@app.post("/files/summarize")
async def summarize_file(ws: Workspace = Depends(get_workspace)) -> Dict[str, Any]:
    if ws.files.active_file is None:
        raise HTTPException(status_code=404, detail="No active file")
    _require_idle(ws.files)
    await ws.files.summarize()
    return _files_body(ws)


@app.get("/notes")
async def list_notes(ws: Workspace = Depends(get_workspace)) -> Dict[str, Any]:
    return {"notes": _dump(ws.snapshot().notes), "summary": ws.notes.summary}


@app.post("/notes")
async def save_note(req: NoteRequest, ws: Workspace = Depends(get_workspace)) -> Dict[str, Any]:
    _require_text(req.title, "title")
    _require_text(req.content, "content")
    return {"note": _dump(ws.notes.save(req.title, req.content))}


@app.delete("/notes/summary")
async def dismiss_notes_summary(ws: Workspace = Depends(get_workspace)) -> Dict[str, Any]:
    ws.notes.dismiss_summary()
    return {"summary": None}


@app.delete("/notes/{note_id}")
async def delete_note(note_id: str, ws: Workspace = Depends(get_workspace)) -> Dict[str, Any]:
    if not ws.notes.delete(note_id):
        raise HTTPException(status_code=404, detail=f"Note {note_id} not found")
    return {"notes": _dump(ws.snapshot().notes)}


@app.post("/notes/summarize")
async def summarize_notes(ws: Workspace = Depends(get_workspace)) -> Dict[str, Any]:
    if not ws.snapshot().notes:
        raise HTTPException(status_code=404, detail="No notes to summarize")
    _require_idle(ws.notes)
    await ws.notes.summarize_all()
    return {"summary": ws.notes.summary}


@app.get("/tasks")
async def list_tasks(ws: Workspace = Depends(get_workspace)) -> Dict[str, Any]:
    return {
        "tasks": _dump(ws.snapshot().tasks),
        "goal": ws.tasks.goal,
        "plan": ws.tasks.plan,
        "status": ws.tasks.status.value,
    }


@app.post("/tasks")
async def add_task(req: TaskRequest, ws: Workspace = Depends(get_workspace)) -> Dict[str, Any]:
    _require_text(req.title, "title")
    return {"task": _dump(ws.tasks.add(req.title, category=req.category))}


@app.post("/tasks/plan")
async def generate_plan(req: PlanRequest, ws: Workspace = Depends(get_workspace)) -> Dict[str, Any]:
    _require_text(req.goal, "goal")
    _require_idle(ws.tasks)
    plan = await ws.tasks.generate_plan(req.goal)
    return {"goal": ws.tasks.goal, "plan": plan}


@app.post("/tasks/plan/accept")
async def accept_plan(ws: Workspace = Depends(get_workspace)) -> Dict[str, Any]:
    if not ws.tasks.plan:
        raise HTTPException(status_code=404, detail="No generated plan to accept")
    created = ws.tasks.accept_plan()
    return {"created": _dump(created), "tasks": _dump(ws.snapshot().tasks)}


@app.delete("/tasks/plan")
async def discard_plan(ws: Workspace = Depends(get_workspace)) -> Dict[str, Any]:
    ws.tasks.discard_plan()
    return {"plan": None}


@app.post("/tasks/{task_id}/toggle")
async def toggle_task(task_id: str, ws: Workspace = Depends(get_workspace)) -> Dict[str, Any]:
    task = ws.tasks.toggle(task_id)
    if task is None:
        raise HTTPException(status_code=404, detail=f"Task {task_id} not found")
    return {"task": _dump(task)}


@app.delete("/tasks/{task_id}")
async def remove_task(task_id: str, ws: Workspace = Depends(get_workspace)) -> Dict[str, Any]:
    if not ws.tasks.remove(task_id):
        raise HTTPException(status_code=404, detail=f"Task {task_id} not found")
    return {"tasks": _dump(ws.snapshot().tasks)}
