"""
Purpose: The interactive read-eval-print loop.
Reads a line, dispatches the control words (exit, clear, paste), hands real
input to the controller and renders the streamed reply and optional metrics.
All runtime failures are printed and the loop keeps going; only a missing
credential stops the session before it starts.
"""

from __future__ import annotations
import logging
from enum import Enum
from typing import Callable, Mapping, Optional

from .config import load_session_config
from .controller import ChatSessionController, TurnResult
from .errors import MissingCredentialError, StreamCreationError
from .interfaces import Console, LLMClient
from .models import SessionConfig
from .prompts import ASSISTANT_MARKER, PASTE_INSTRUCTION, USER_PROMPT, banner_lines
from .services.llm_openai import GroqLLMClient
from .services.metrics import format_metrics, measure_turn
from .services.terminal import Terminal


class Command(str, Enum):
    EXIT = "exit"
    CLEAR = "clear"
    PASTE = "paste"


PASTE_TERMINATOR = "done"


class ChatSession:
    def __init__(
        self,
        controller: ChatSessionController,
        console: Console,
        *,
        verbose: bool = False,
    ):
        self.controller = controller
        self.console = console
        self.verbose = verbose

    def print_banner(self) -> None:
        for line in banner_lines(self.controller.model_id):
            self.console.info(line)

    def run(self) -> None:
        """Loop until `exit` or end of input."""
        while True:
            line = self.console.read_line(USER_PROMPT)
            if line is None or line == Command.EXIT:
                break

            if line == Command.CLEAR:
                self.console.clear()
                continue

            text = self.collect_paste() if line == Command.PASTE else line
            if not text:
                continue

            self.exchange(text)

    def collect_paste(self) -> str:
        """Gather lines up to `done` (or end of input) as one trimmed block."""
        self.console.user(PASTE_INSTRUCTION)
        lines: list[str] = []
        while True:
            line = self.console.read_line()
            if line is None or line == PASTE_TERMINATOR:
                break
            lines.append(line)
        return "\n".join(lines).strip()

    def exchange(self, text: str) -> Optional[TurnResult]:
        try:
            result = self.controller.run_turn(
                text,
                self.console.assistant,
                on_open=lambda: self.console.assistant(ASSISTANT_MARKER),
            )
        except StreamCreationError as exc:
            self.console.error(f"Error creating stream: {exc}")
            return None

        if result.receive_error is not None:
            self.console.error(f"Error receiving response: {result.receive_error}")
        self.console.newline()

        if self.verbose:
            metrics = measure_turn(result.user_text, result.response_text, result.elapsed)
            for line in format_metrics(metrics):
                self.console.metrics(line)
        return result


def _default_llm(config: SessionConfig) -> LLMClient:
    return GroqLLMClient(config.api_key, config.base_url)


def run_chat(
    *,
    verbose: bool = False,
    environ: Optional[Mapping[str, str]] = None,
    console: Optional[Console] = None,
    llm_factory: Callable[[SessionConfig], LLMClient] = _default_llm,
) -> int:
    """Validate configuration, then run one interactive session. Returns the exit code."""
    console = console or Terminal()
    try:
        config = load_session_config(environ, verbose=verbose)
    except MissingCredentialError as exc:
        logging.error("Session not started: %s is not set", exc.variable)
        console.error(str(exc))
        return 0

    controller = ChatSessionController(llm_factory(config), config)
    session = ChatSession(controller, console, verbose=config.verbose)

    console.clear()
    session.print_banner()
    try:
        session.run()
    except KeyboardInterrupt:
        console.newline()
    logging.info("Session ended after %d messages", len(controller.transcript))
    return 0
