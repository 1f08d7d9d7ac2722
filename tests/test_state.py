import pytest
from pydantic import ValidationError

from assistant.core.models import Message, Note, Task, UploadedFile
from assistant.core.state import (
    AppState,
    StateStore,
    append_message,
    delete_note,
    delete_task,
    prepend_note,
    prepend_tasks,
    toggle_task,
)


class TestRecords:
    def test_ids_are_unique(self):
        ids = {Task(title="t").id for _ in range(500)}
        assert len(ids) == 500

    def test_records_are_frozen(self):
        note = Note(title="a", content="b")
        with pytest.raises(ValidationError):
            note.title = "changed"

    def test_message_role_is_restricted(self):
        with pytest.raises(ValidationError):
            Message(role="assistant", content="hi")


class TestTransforms:
    def test_delete_note_removes_exactly_one_and_keeps_order(self):
        notes = ()
        for i in range(4):
            notes = prepend_note(notes, Note(title=f"n{i}", content="x"))
        target = notes[1]

        remaining = delete_note(notes, target.id)

        assert len(remaining) == 3
        assert [n.title for n in remaining] == ["n3", "n1", "n0"]
        assert len(notes) == 4

    def test_delete_unknown_note_is_noop(self):
        notes = (Note(title="a", content="b"),)
        assert delete_note(notes, "missing") == notes

    def test_toggle_twice_restores_task(self):
        task = Task(title="Write report", category="work")
        tasks = (task,)
        toggled = toggle_task(tasks, task.id)
        assert toggled[0].completed is True
        assert tasks[0].completed is False
        restored = toggle_task(toggled, task.id)
        assert [t.model_dump() for t in restored] == [t.model_dump() for t in tasks]

    def test_prepend_tasks_keeps_batch_order(self):
        existing = (Task(title="old"),)
        result = prepend_tasks(existing, [Task(title="a"), Task(title="b")])
        assert [t.title for t in result] == ["a", "b", "old"]

    def test_delete_task(self):
        a, b = Task(title="a"), Task(title="b")
        assert delete_task((a, b), a.id) == (b,)

    def test_append_message(self):
        first = Message(role="user", content="hi")
        second = Message(role="model", content="hello")
        assert append_message((first,), second) == (first, second)


class TestStateStore:
    def test_update_replaces_snapshot(self):
        store = StateStore()
        before = store.state
        after = store.update(active_file=UploadedFile(name="a.txt", content="x", size=1))
        assert before.active_file is None
        assert after.active_file.name == "a.txt"
        assert store.state is after

    def test_apply_uses_current_state(self):
        store = StateStore(AppState(tasks=(Task(title="a"),)))
        store.apply(lambda s: s.model_copy(update={"tasks": prepend_tasks(s.tasks, [Task(title="b")])}))
        assert [t.title for t in store.state.tasks] == ["b", "a"]
