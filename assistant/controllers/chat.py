from __future__ import annotations

import logging
from typing import Optional

from assistant.controllers.base import ViewController
from assistant.core import prompt
from assistant.core.models import Message
from assistant.core.state import append_message
from config.settings import get_settings


logger = logging.getLogger(__name__)


class ChatController(ViewController):
    name = "chat"

    def file_context(self) -> str:
        active = self.store.state.active_file
        if active is None:
            return ""
        limit = get_settings().chat_context_chars
        return prompt.FILE_CONTEXT.format(name=active.name, content=active.content[:limit])

    async def send(self, text: str) -> Optional[Message]:
        if not text or not text.strip() or self.is_loading:
            return None

        history = self.store.state.messages
        user_msg = Message(role="user", content=text)
        self.store.apply(lambda s: s.model_copy(update={"messages": append_message(s.messages, user_msg)}))

        reply = await self._call(
            self.gateway.chat_reply(history, text, self.file_context()),
            prompt.CHAT_FAILED,
        )
        if reply is None:
            return None

        bot_msg = Message(role="model", content=reply)
        self.store.apply(lambda s: s.model_copy(update={"messages": append_message(s.messages, bot_msg)}))
        return bot_msg

    def clear(self) -> None:
        self.abandon()
        self.store.update(messages=())
        logger.info("Chat history cleared")
