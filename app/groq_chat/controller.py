"""
Purpose: The single orchestration point for a chat session's state. Owns the
transcript and the request lifecycle of one turn, so the session loop only
deals with input dispatch and rendering.

Key responsibilities:
- Seed the transcript with the system instruction.
- Append the user message, open a completion stream over the full history.
- Relay fragments to a callback while accumulating them.
- Release the stream exactly once, then append the assistant message
  (partial text included when the stream broke).
- Report elapsed wall-clock time for metrics.

Testing: Pure unit tests with a fake LLMClient and a fake clock.
"""

from __future__ import annotations
import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from .errors import StreamReceiveError
from .interfaces import LLMClient
from .models import Message, SessionConfig
from .persistence.session_store import InMemoryTranscript
from .prompts import SYSTEM_PROMPT


@dataclass
class TurnResult:
    user_text: str
    response_text: str
    elapsed: float
    receive_error: Optional[StreamReceiveError] = None

    @property
    def complete(self) -> bool:
        return self.receive_error is None


class ChatSessionController:
    def __init__(
        self,
        llm: LLMClient,
        config: SessionConfig,
        *,
        transcript: Optional[InMemoryTranscript] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.llm: LLMClient = llm
        self.config = config
        self.transcript = transcript or InMemoryTranscript(SYSTEM_PROMPT)
        self._clock = clock

    @property
    def model_id(self) -> str:
        return self.config.model.model_id

    def get_history(self) -> list[Message]:
        """Get the current full history of messages."""
        return self.transcript.get()

    def run_turn(
        self,
        user_text: str,
        on_fragment: Callable[[str], None],
        *,
        on_open: Optional[Callable[[], None]] = None,
    ) -> TurnResult:
        """
        One exchange: user message in, streamed assistant message out.
        StreamCreationError propagates with the user message already recorded
        and no assistant message; receive errors end the turn early and are
        returned on the result.
        """
        self.transcript.append_user(user_text)
        start = self._clock()

        stream = self.llm.stream_chat(self.get_history(), self.config.llm_settings())
        if on_open is not None:
            on_open()

        parts: list[str] = []
        receive_error: Optional[StreamReceiveError] = None
        with stream:
            try:
                for fragment in stream:
                    on_fragment(fragment)
                    parts.append(fragment)
            except StreamReceiveError as exc:
                receive_error = exc

        elapsed = self._clock() - start
        response = "".join(parts)
        self.transcript.append_assistant(response)
        logging.info(
            "Turn finished on %s: %d fragments in %.3fs",
            self.model_id,
            len(parts),
            elapsed,
        )
        return TurnResult(
            user_text=user_text,
            response_text=response,
            elapsed=elapsed,
            receive_error=receive_error,
        )
