from assistant.controllers.base import Status, ViewController
from assistant.controllers.chat import ChatController
from assistant.controllers.files import FileController
from assistant.controllers.notes import NotesController
from assistant.controllers.tasks import TasksController
from assistant.controllers.workspace import Workspace

__all__ = [
    "ChatController",
    "FileController",
    "NotesController",
    "Status",
    "TasksController",
    "ViewController",
    "Workspace",
]
