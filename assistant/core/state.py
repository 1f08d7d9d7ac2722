"""Application state snapshot and the pure transformations applied to it.

Every function here returns a new tuple or a new ``AppState``; nothing is
mutated in place. ``StateStore`` is the single owner of the current snapshot
and is handed to each view controller by the workspace.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from assistant.core.models import Message, Note, Task, UploadedFile


logger = logging.getLogger(__name__)


class AppState(BaseModel):
    model_config = ConfigDict(frozen=True)

    messages: Tuple[Message, ...] = ()
    active_file: Optional[UploadedFile] = None
    notes: Tuple[Note, ...] = ()
    tasks: Tuple[Task, ...] = ()


def append_message(messages: Tuple[Message, ...], message: Message) -> Tuple[Message, ...]:
    return messages + (message,)


def prepend_note(notes: Tuple[Note, ...], note: Note) -> Tuple[Note, ...]:
    return (note,) + notes


def delete_note(notes: Tuple[Note, ...], note_id: str) -> Tuple[Note, ...]:
    return tuple(n for n in notes if n.id != note_id)


def prepend_tasks(tasks: Tuple[Task, ...], new_tasks: Iterable[Task]) -> Tuple[Task, ...]:
    return tuple(new_tasks) + tasks


def toggle_task(tasks: Tuple[Task, ...], task_id: str) -> Tuple[Task, ...]:
    return tuple(
        t.model_copy(update={"completed": not t.completed}) if t.id == task_id else t
        for t in tasks
    )


def delete_task(tasks: Tuple[Task, ...], task_id: str) -> Tuple[Task, ...]:
    return tuple(t for t in tasks if t.id != task_id)


class StateStore:
    def __init__(self, initial: Optional[AppState] = None) -> None:
        self._state = initial or AppState()

    @property
    def state(self) -> AppState:
        return self._state

    def update(self, **changes) -> AppState:
        return self.apply(lambda s: s.model_copy(update=changes))

    def apply(self, transform: Callable[[AppState], AppState]) -> AppState:
        self._state = transform(self._state)
        logger.debug(
            "State updated: messages=%s notes=%s tasks=%s file=%s",
            len(self._state.messages),
            len(self._state.notes),
            len(self._state.tasks),
            self._state.active_file.name if self._state.active_file else None,
        )
        return self._state
