"""
Purpose: Token math for the verbose metrics block.
Word counts stand in for tokens; this is a rough figure, not a tokenizer.
"""

from __future__ import annotations

from ..models import TurnMetrics


def estimate_tokens_from_text(text: str) -> int:
    """Crude heuristic: one token per whitespace-delimited word."""
    return len((text or "").split())


def measure_turn(user_text: str, response_text: str, elapsed: float) -> TurnMetrics:
    return TurnMetrics(
        elapsed_seconds=elapsed,
        input_tokens=estimate_tokens_from_text(user_text),
        output_tokens=estimate_tokens_from_text(response_text),
    )


def format_metrics(metrics: TurnMetrics) -> list[str]:
    return [
        "\nMetrics:",
        f"Time taken: {metrics.elapsed_seconds:.2f} seconds",
        f"Speed: {metrics.tokens_per_second:.2f} tokens/second",
        f"Input tokens: {metrics.input_tokens}",
        f"Output tokens: {metrics.output_tokens}",
        f"Total tokens: {metrics.total_tokens}",
    ]
