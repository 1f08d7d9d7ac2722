from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from assistant.core import prompt
from assistant.core.models import Message
from config.settings import get_settings


logger = logging.getLogger(__name__)


def build_llm() -> BaseChatModel:
    settings = get_settings()
    if not settings.google_api_key:
        raise RuntimeError(
            "GOOGLE_API_KEY not set. Please configure it in environment or .env"
        )

    return ChatGoogleGenerativeAI(
        model=settings.gemini_model,
        google_api_key=settings.google_api_key,
        temperature=settings.temperature,
        top_p=settings.top_p,
    )


def to_lc_messages(history: Sequence[Message], limit: int) -> List[BaseMessage]:
    messages: List[BaseMessage] = []
    for item in list(history)[-limit:] if limit > 0 else []:
        if item.role == "model":
            messages.append(AIMessage(content=item.content))
        else:
            messages.append(HumanMessage(content=item.content))
    return messages


def _response_text(result: Any) -> str:
    content = getattr(result, "content", result)
    if isinstance(content, str):
        return content.strip()
    # Gemini may answer with a list of content parts.
    parts = []
    for part in content or []:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type", "text") == "text":
            parts.append(part.get("text") or "")
    return "".join(parts).strip()


class Gateway:
    """The three request shapes sent to the generative-language service.

    Each call is a single round trip with no retry. Any failure is logged and
    collapsed into the operation's fixed fallback string.
    """

    def __init__(self, llm: Optional[BaseChatModel] = None, history_limit: Optional[int] = None) -> None:
        self._llm = llm
        self.history_limit = (
            history_limit if history_limit is not None else get_settings().chat_history_limit
        )

    @property
    def llm(self) -> BaseChatModel:
        if self._llm is None:
            self._llm = build_llm()
            logger.info("Model client ready: model=%s", get_settings().gemini_model)
        return self._llm

    async def chat_reply(
        self,
        history: Sequence[Message],
        new_message: str,
        file_context: str = "",
    ) -> str:
        try:
            question = new_message
            if file_context:
                question = prompt.CONTEXT_PROMPT.format(context=file_context, question=new_message)

            messages: List[BaseMessage] = [SystemMessage(content=prompt.SYSTEM_PROMPT)]
            messages.extend(to_lc_messages(history, self.history_limit))
            messages.append(HumanMessage(content=question))
            logger.info(
                "Chat request: history_turns=%s prompt_len=%s file_context=%s",
                len(messages) - 2,
                len(question),
                bool(file_context),
            )
            result = await self.llm.ainvoke(messages)
            return _response_text(result) or prompt.CHAT_EMPTY
        except Exception:
            logger.exception("Gemini chat error")
            return prompt.CHAT_FAILED

    async def summarize(self, text: str) -> str:
        try:
            logger.info("Summary request: input_len=%s", len(text))
            result = await self.llm.ainvoke(prompt.SUMMARY_PROMPT.format(text=text))
            return _response_text(result) or prompt.SUMMARY_EMPTY
        except Exception:
            logger.exception("Gemini summarize error")
            return prompt.SUMMARY_FAILED

    async def plan_from_goal(self, goal: str) -> str:
        try:
            logger.info("Plan request: goal_len=%s", len(goal))
            result = await self.llm.ainvoke(prompt.PLAN_PROMPT.format(goal=goal))
            return _response_text(result) or prompt.PLAN_EMPTY
        except Exception:
            logger.exception("Gemini plan error")
            return prompt.PLAN_FAILED
