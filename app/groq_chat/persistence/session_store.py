"""
Purpose: Session transcript storage, in memory only.
The transcript lives as long as the process and is never saved or restored.

What is inside:
InMemoryTranscript seeded with one system message; append_user/append_assistant
are the only writers, there is no set/reset.

Testing:
Simple state tests: seed, append order, length.
"""

from __future__ import annotations

from ..models import Message, Role


class InMemoryTranscript:
    def __init__(self, system_prompt: str) -> None:
        self._messages: list[Message] = [Message(Role.SYSTEM, system_prompt)]

    def get(self) -> list[Message]:
        return self._messages[:]

    def append_user(self, text: str) -> Message:
        return self._append(Message(Role.USER, text))

    def append_assistant(self, text: str) -> Message:
        return self._append(Message(Role.ASSISTANT, text))

    def _append(self, message: Message) -> Message:
        self._messages.append(message)
        return message

    def __len__(self) -> int:
        return len(self._messages)
