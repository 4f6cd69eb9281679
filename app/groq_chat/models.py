"""
Canonical data shapes, shared truth for typing between layers.

Typical contents:
- Role (system, user, assistant) and Message (role, content).
- SupportedModel: closed allow-list of Groq models with a default.
- LLMSettings (model, temperature, stream) sent with every request.
- SessionConfig: built once at startup, immutable afterwards.
- TurnMetrics: the per-turn timing/throughput figures.

Testing: Mostly types. SupportedModel.resolve and Message.as_payload are
worth a direct test.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional

DEFAULT_BASE_URL = "https://api.groq.com/openai/v1"
DEFAULT_TEMPERATURE = 0.7


class Role(str, Enum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class SupportedModel(Enum):
    LLAMA_INSTANT = ("llama-instant", "llama-3.1-8b-instant")
    LLAMA_70B = ("llama-70b", "llama3-70b-8192")
    MIXTRAL = ("mixtral", "mixtral-8x7b-32768")

    def __init__(self, short_name: str, model_id: str):
        self.short_name = short_name
        self.model_id = model_id

    @classmethod
    def default(cls) -> "SupportedModel":
        return cls.LLAMA_INSTANT

    @classmethod
    def resolve(cls, short_name: Optional[str]) -> "SupportedModel":
        """Map a short name to a model, falling back to the default."""
        for model in cls:
            if model.short_name == short_name:
                return model
        return cls.default()


@dataclass(frozen=True)
class Message:
    role: Role
    content: str

    def as_payload(self) -> dict[str, str]:
        return {"role": self.role.value, "content": self.content}


@dataclass(frozen=True)
class LLMSettings:
    model: str
    temperature: float = DEFAULT_TEMPERATURE
    stream: bool = True


@dataclass(frozen=True)
class SessionConfig:
    api_key: str
    model: SupportedModel = SupportedModel.LLAMA_INSTANT
    base_url: str = DEFAULT_BASE_URL
    temperature: float = DEFAULT_TEMPERATURE
    stream: bool = True
    verbose: bool = False

    def llm_settings(self) -> LLMSettings:
        return LLMSettings(
            model=self.model.model_id,
            temperature=self.temperature,
            stream=self.stream,
        )


@dataclass(frozen=True)
class TurnMetrics:
    elapsed_seconds: float
    input_tokens: int
    output_tokens: int

    @property
    def total_tokens(self) -> int:
        return self.input_tokens + self.output_tokens

    @property
    def tokens_per_second(self) -> float:
        if self.elapsed_seconds <= 0:
            return 0.0
        return self.total_tokens / self.elapsed_seconds
