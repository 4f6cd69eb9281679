import pytest

from fakes import FakeClock, FakeLLM, FakeStream
from groq_chat.controller import ChatSessionController
from groq_chat.errors import StreamCreationError
from groq_chat.models import Role
from groq_chat.prompts import SYSTEM_PROMPT


def test_turn_streams_fragments_in_order(config):
    llm = FakeLLM([["Hel", "lo", " there"]])
    controller = ChatSessionController(llm, config, clock=FakeClock(step=1.5))
    seen = []

    result = controller.run_turn("hi", seen.append)

    assert seen == ["Hel", "lo", " there"]
    assert result.response_text == "Hello there"
    assert result.elapsed == 1.5
    assert result.complete
    history = controller.get_history()
    assert [m.role for m in history] == [Role.SYSTEM, Role.USER, Role.ASSISTANT]
    assert history[0].content == SYSTEM_PROMPT
    assert history[-1].content == "Hello there"
    assert llm.streams[0].close_calls == 1


def test_request_carries_full_history_and_settings(config):
    llm = FakeLLM([["a"], ["b"]])
    controller = ChatSessionController(llm, config, clock=FakeClock())
    controller.run_turn("first", lambda _: None)
    controller.run_turn("second", lambda _: None)

    messages, settings = llm.calls[1]
    assert [m.content for m in messages] == [SYSTEM_PROMPT, "first", "a", "second"]
    assert settings.model == "llama-3.1-8b-instant"
    assert settings.temperature == 0.7
    assert settings.stream is True


def test_creation_failure_keeps_user_message_only(config):
    llm = FakeLLM([StreamCreationError("401 invalid api key")])
    controller = ChatSessionController(llm, config, clock=FakeClock())
    opened = []

    with pytest.raises(StreamCreationError):
        controller.run_turn("hi", lambda _: None, on_open=lambda: opened.append(True))

    assert opened == []
    assert len(controller.transcript) == 2
    assert controller.get_history()[-1].role is Role.USER


def test_receive_failure_keeps_partial_text(config, receive_error):
    stream = FakeStream(["par", "tial"], fail_with=receive_error)
    llm = FakeLLM([stream])
    controller = ChatSessionController(llm, config, clock=FakeClock())

    result = controller.run_turn("hi", lambda _: None)

    assert result.receive_error is receive_error
    assert not result.complete
    assert result.response_text == "partial"
    assert controller.get_history()[-1].content == "partial"
    assert stream.close_calls == 1


def test_empty_stream_still_appends_assistant(config):
    llm = FakeLLM([[]])
    controller = ChatSessionController(llm, config, clock=FakeClock())
    result = controller.run_turn("hi", lambda _: None)
    assert result.response_text == ""
    assert controller.get_history()[-1].role is Role.ASSISTANT
