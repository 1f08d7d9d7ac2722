from __future__ import annotations

import logging
from typing import Dict, Optional

from assistant.controllers.base import ViewController
from assistant.controllers.chat import ChatController
from assistant.controllers.files import FileController
from assistant.controllers.notes import NotesController
from assistant.controllers.tasks import TasksController
from assistant.core.models import View
from assistant.core.state import AppState, StateStore
from assistant.gateway import Gateway


logger = logging.getLogger(__name__)


class Workspace:
    """Root controller: owns the state store, the view controllers and navigation."""

    def __init__(self, gateway: Optional[Gateway] = None, store: Optional[StateStore] = None) -> None:
        self.store = store or StateStore()
        self.gateway = gateway or Gateway()
        self.active_view = View.CHAT

        self.chat = ChatController(self.store, self.gateway)
        self.files = FileController(self.store, self.gateway)
        self.notes = NotesController(self.store, self.gateway)
        self.tasks = TasksController(self.store, self.gateway)

    @property
    def controllers(self) -> Dict[View, ViewController]:
        return {
            View.CHAT: self.chat,
            View.FILES: self.files,
            View.NOTES: self.notes,
            View.TASKS: self.tasks,
        }

    @property
    def current(self) -> ViewController:
        return self.controllers[self.active_view]

    def switch_view(self, view: View) -> View:
        view = View(view)
        if view != self.active_view:
            self.current.abandon()
            logger.info("View switched: %s -> %s", self.active_view.value, view.value)
            self.active_view = view
        return self.active_view

    def snapshot(self) -> AppState:
        return self.store.state
