from __future__ import annotations

import time
import uuid
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class View(str, Enum):
    CHAT = "CHAT"
    FILES = "FILES"
    NOTES = "NOTES"
    TASKS = "TASKS"


def new_id() -> str:
    return uuid.uuid4().hex


def now_ms() -> int:
    return int(time.time() * 1000)


class Record(BaseModel):
    """Immutable base for everything held in application state."""

    model_config = ConfigDict(frozen=True)


class Message(Record):
    id: str = Field(default_factory=new_id)
    role: Literal["user", "model"]
    content: str
    timestamp: int = Field(default_factory=now_ms)


class Note(Record):
    id: str = Field(default_factory=new_id)
    title: str
    content: str
    created_at: int = Field(default_factory=now_ms)


class Task(Record):
    id: str = Field(default_factory=new_id)
    title: str
    completed: bool = False
    category: Optional[str] = None


class UploadedFile(Record):
    name: str
    content: str
    type: str = ""
    size: int = 0
