"""
Purpose: Thin client wrapper around the openai SDK, pointed at Groq's
OpenAI-compatible endpoint. One place for auth, base URL, request options
and error normalization.

Extensibility:
- Other OpenAI-compatible providers only need a different base_url.
- A non-OpenAI provider implements interfaces.LLMClient directly.

Testing: Pass a fake `client` with chat.completions.create; assert chunks
map to text fragments and SDK errors map to StreamCreationError /
StreamReceiveError. No retries: a failed turn is reported and abandoned.
"""

from __future__ import annotations
import logging
import time
from typing import Any, Iterator, Optional, Sequence

import httpx
from openai import OpenAI, OpenAIError

from ..errors import StreamCreationError, StreamReceiveError
from ..models import DEFAULT_BASE_URL, LLMSettings, Message


def _delta_text(chunk: Any) -> str:
    choices = getattr(chunk, "choices", None)
    if not choices:
        return ""
    delta = getattr(choices[0], "delta", None)
    return getattr(delta, "content", None) or ""


class OpenAICompletionStream:
    """Iterate the text deltas of a streaming chat completion."""

    def __init__(self, stream: Any, *, model: str = "") -> None:
        self._stream = stream
        self._model = model
        self._closed = False
        self.fragments = 0

    def __iter__(self) -> Iterator[str]:
        try:
            for chunk in self._stream:
                text = _delta_text(chunk)
                if not text:
                    continue
                self.fragments += 1
                yield text
        except (OpenAIError, httpx.HTTPError, httpx.StreamError, ValueError) as exc:
            # ValueError covers malformed SSE payloads (json.JSONDecodeError).
            # httpx.StreamError subclasses derive from RuntimeError.
            logging.error("Stream receive failed for %s: %s", self._model, exc)
            raise StreamReceiveError(str(exc)) from exc

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._stream.close()

    def __enter__(self) -> "OpenAICompletionStream":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class GroqLLMClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        *,
        client: Optional[Any] = None,
    ):
        self.api_key = api_key
        if client is None:
            client = OpenAI(api_key=api_key, base_url=base_url)
        self.client = client

    def stream_chat(
        self,
        messages: Sequence[Message],
        settings: LLMSettings,
    ) -> OpenAICompletionStream:
        started = time.monotonic()
        try:
            stream = self.client.chat.completions.create(
                model=settings.model,
                messages=[m.as_payload() for m in messages],
                temperature=settings.temperature,
                stream=settings.stream,
            )
        except OpenAIError as exc:
            logging.error("Chat completion request failed: %s", exc)
            raise StreamCreationError(str(exc)) from exc

        logging.info(
            "Stream opened for %s in %.3fs", settings.model, time.monotonic() - started
        )
        return OpenAICompletionStream(stream, model=settings.model)
