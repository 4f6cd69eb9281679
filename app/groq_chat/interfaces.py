"""
Abstractions for pluggable services. The controller and session loop depend
on these protocols, not on the openai SDK or a real terminal, which keeps
both testable with small fakes.

Common protocols:
- CompletionStream: iterate text fragments, then close() exactly once.
- LLMClient.stream_chat(messages, settings) -> CompletionStream
- Console: prompt/read lines and render user, assistant, metrics and error text.

Testing: Use simple fake implementations to drive the session without network calls.
"""

from __future__ import annotations
from typing import Iterator, Optional, Protocol, Sequence

from .models import LLMSettings, Message


class CompletionStream(Protocol):
    def __iter__(self) -> Iterator[str]: ...

    def close(self) -> None: ...

    def __enter__(self) -> "CompletionStream": ...

    def __exit__(self, exc_type, exc, tb) -> None: ...


class LLMClient(Protocol):
    def stream_chat(
        self,
        messages: Sequence[Message],
        settings: LLMSettings,
    ) -> CompletionStream: ...


class Console(Protocol):
    def read_line(self, prompt: str = "") -> Optional[str]: ...

    def user(self, text: str) -> None: ...

    def assistant(self, text: str) -> None: ...

    def metrics(self, text: str) -> None: ...

    def error(self, text: str) -> None: ...

    def info(self, text: str) -> None: ...

    def newline(self) -> None: ...

    def clear(self) -> None: ...
