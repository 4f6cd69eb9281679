"""Fixed texts shown to the model and to the user."""

from __future__ import annotations

SYSTEM_PROMPT = "Provide helpful and concise responses"

PERSON_GLYPH = "󰙊 "
ROBOT_GLYPH = "󰚩 "

USER_PROMPT = f"\n{PERSON_GLYPH} You: "
ASSISTANT_MARKER = f"{ROBOT_GLYPH} Assistant: "
PASTE_INSTRUCTION = "Enter your text (type 'done' on a new line when finished):\n"


def banner_lines(model_id: str) -> list[str]:
    return [
        f"Chat started using model: {model_id} (type 'exit' to quit)",
        "Type 'clear' to clear the screen",
        "For multiline input, type 'paste' and press Enter",
    ]
