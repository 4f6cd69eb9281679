from __future__ import annotations

import pytest

from groq_chat.errors import StreamReceiveError
from groq_chat.models import SessionConfig, SupportedModel


@pytest.fixture()
def config() -> SessionConfig:
    return SessionConfig(api_key="gsk-test", model=SupportedModel.LLAMA_INSTANT)


@pytest.fixture()
def receive_error() -> StreamReceiveError:
    return StreamReceiveError("connection reset")
