from __future__ import annotations

from typing import Optional

from assistant.controllers.base import ViewController
from assistant.core import prompt
from assistant.core.models import Note
from assistant.core.state import delete_note, prepend_note


class NotesController(ViewController):
    name = "notes"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.summary: Optional[str] = None

    def save(self, title: str, content: str) -> Optional[Note]:
        if not title.strip() or not content.strip():
            return None
        note = Note(title=title, content=content)
        self.store.apply(lambda s: s.model_copy(update={"notes": prepend_note(s.notes, note)}))
        return note

    def delete(self, note_id: str) -> bool:
        before = self.store.state.notes
        after = self.store.update(notes=delete_note(before, note_id)).notes
        return len(after) != len(before)

    async def summarize_all(self) -> Optional[str]:
        notes = self.store.state.notes
        if not notes or self.is_loading:
            return None

        joined = prompt.NOTE_SEPARATOR.join(
            prompt.NOTE_ENTRY.format(title=n.title, content=n.content) for n in notes
        )
        result = await self._call(self.gateway.summarize(joined), prompt.SUMMARY_FAILED)
        if result is not None:
            self.summary = result
        return result

    def dismiss_summary(self) -> None:
        self.summary = None
