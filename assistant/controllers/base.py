from __future__ import annotations

import logging
from enum import Enum
from typing import Awaitable, Optional

from assistant.core.pending import PendingCall
from assistant.core.state import StateStore
from assistant.gateway import Gateway


logger = logging.getLogger(__name__)


class Status(str, Enum):
    IDLE = "idle"
    AWAITING = "awaiting"


class ViewController:
    """Shared idle/awaiting machinery for the per-view controllers."""

    name = "view"

    def __init__(self, store: StateStore, gateway: Gateway) -> None:
        self.store = store
        self.gateway = gateway
        self._pending: Optional[PendingCall] = None

    @property
    def status(self) -> Status:
        return Status.AWAITING if self._pending is not None else Status.IDLE

    @property
    def is_loading(self) -> bool:
        return self._pending is not None

    def abandon(self) -> None:
        if self._pending is not None:
            logger.info("%s: abandoning in-flight call", self.name)
            self._pending.abandon()
            self._pending = None

    async def _call(self, request: Awaitable[str], fallback: str) -> Optional[str]:
        """Run one gateway call; returns None when the result was abandoned."""
        call = PendingCall(request)
        self._pending = call
        try:
            text = await call.wait()
        except Exception:
            logger.exception("%s: gateway call failed", self.name)
            text = fallback
        finally:
            if self._pending is call:
                self._pending = None

        if call.abandoned:
            logger.info("%s: discarding result of abandoned call", self.name)
            return None
        return text
