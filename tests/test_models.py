from groq_chat.models import (
    DEFAULT_TEMPERATURE,
    Message,
    Role,
    SessionConfig,
    SupportedModel,
    TurnMetrics,
)


def test_resolve_known_short_names():
    assert SupportedModel.resolve("llama-instant").model_id == "llama-3.1-8b-instant"
    assert SupportedModel.resolve("llama-70b").model_id == "llama3-70b-8192"
    assert SupportedModel.resolve("mixtral").model_id == "mixtral-8x7b-32768"


def test_resolve_unknown_or_missing_falls_back_to_default():
    assert SupportedModel.resolve("gpt-4o") is SupportedModel.LLAMA_INSTANT
    assert SupportedModel.resolve(None) is SupportedModel.default()
    assert SupportedModel.resolve("") is SupportedModel.LLAMA_INSTANT
    # Full identifiers are not short names.
    assert SupportedModel.resolve("mixtral-8x7b-32768") is SupportedModel.LLAMA_INSTANT


def test_message_payload_uses_role_value():
    assert Message(Role.USER, "hi").as_payload() == {"role": "user", "content": "hi"}


def test_session_config_settings_are_fixed():
    config = SessionConfig(api_key="k", model=SupportedModel.MIXTRAL, verbose=True)
    settings = config.llm_settings()
    assert settings.model == "mixtral-8x7b-32768"
    assert settings.temperature == DEFAULT_TEMPERATURE == 0.7
    assert settings.stream is True


def test_turn_metrics_totals_and_speed():
    metrics = TurnMetrics(elapsed_seconds=2.0, input_tokens=3, output_tokens=5)
    assert metrics.total_tokens == 8
    assert metrics.tokens_per_second == 4.0


def test_turn_metrics_zero_elapsed_reports_zero_speed():
    assert TurnMetrics(0.0, 1, 1).tokens_per_second == 0.0
