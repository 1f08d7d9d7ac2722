from __future__ import annotations

import asyncio
from typing import Any, Awaitable


class PendingCall:
    """Handle for an in-flight gateway call.

    Abandoning does not cancel the underlying request. It only marks the
    eventual result as stale so the owner drops it instead of applying it.
    """

    def __init__(self, awaitable: Awaitable[Any]) -> None:
        self._task = asyncio.ensure_future(awaitable)
        self._abandoned = False

    @property
    def abandoned(self) -> bool:
        return self._abandoned

    @property
    def done(self) -> bool:
        return self._task.done()

    def abandon(self) -> None:
        self._abandoned = True

    async def wait(self) -> Any:
        return await self._task
