from __future__ import annotations

import logging
from typing import List, Optional

from assistant.controllers.base import ViewController
from assistant.core import prompt
from assistant.core.models import Task
from assistant.core.state import delete_task, prepend_tasks, toggle_task
from assistant.planner import parse_plan


logger = logging.getLogger(__name__)


class TasksController(ViewController):
    name = "tasks"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.goal: str = ""
        self.plan: Optional[str] = None

    def _find(self, task_id: str) -> Optional[Task]:
        return next((t for t in self.store.state.tasks if t.id == task_id), None)

    def add(self, title: str, category: Optional[str] = None) -> Optional[Task]:
        if not title.strip():
            return None
        task = Task(title=title, category=category)
        self.store.apply(lambda s: s.model_copy(update={"tasks": prepend_tasks(s.tasks, [task])}))
        return task

    def toggle(self, task_id: str) -> Optional[Task]:
        self.store.apply(lambda s: s.model_copy(update={"tasks": toggle_task(s.tasks, task_id)}))
        return self._find(task_id)

    def remove(self, task_id: str) -> bool:
        if self._find(task_id) is None:
            return False
        self.store.apply(lambda s: s.model_copy(update={"tasks": delete_task(s.tasks, task_id)}))
        return True

    async def generate_plan(self, goal: str) -> Optional[str]:
        if not goal or not goal.strip() or self.is_loading:
            return None

        self.goal = goal
        self.plan = None
        result = await self._call(self.gateway.plan_from_goal(goal), prompt.PLAN_FAILED)
        if result is None:
            self.goal = ""
        else:
            self.plan = result
        return result

    def accept_plan(self) -> List[Task]:
        if not self.plan:
            return []
        new_tasks = [Task(title=title) for title in parse_plan(self.plan)]
        self.store.apply(lambda s: s.model_copy(update={"tasks": prepend_tasks(s.tasks, new_tasks)}))
        logger.info("Plan accepted: %s tasks created", len(new_tasks))
        self.discard_plan()
        return new_tasks

    def discard_plan(self) -> None:
        self.plan = None
        self.goal = ""
