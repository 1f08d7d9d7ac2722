from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.messages import AIMessage

from assistant.controllers import Workspace
from assistant.gateway import Gateway


@pytest.fixture
def llm():
    """Stand-in chat model: answers every request with a fixed AIMessage."""
    model = MagicMock()
    model.ainvoke = AsyncMock(return_value=AIMessage(content="Sure, here you go."))
    return model


@pytest.fixture
def gateway(llm):
    return Gateway(llm=llm, history_limit=10)


@pytest.fixture
def workspace(gateway):
    return Workspace(gateway=gateway)
