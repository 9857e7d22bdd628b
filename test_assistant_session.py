#!/usr/bin/env python3
"""
Tests for the assistant conversation state machine and the Gemini provider wrapper
"""

import asyncio
import os
import sys

import pytest

sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from assistant.providers import GeminiProvider, ProviderUnavailable
from assistant.session import AssistantSession, Role, SessionState

APOLOGY = "माफ गर्नुहोस्, मलाई अहिले केही समस्या भइरहेको छ। कृपया पछि फेरि प्रयास गर्नुहोस्।"


async def _echo(question):
    return f"उत्तर: {question}"


async def _broken(question):
    raise ConnectionError("network unreachable")


def test_blank_submission_is_a_no_op():
    session = AssistantSession(_echo)
    for blank in ("", "   ", "\n\t"):
        assert asyncio.run(session.submit(blank)) is False
    assert session.turns == ()
    assert session.state is SessionState.IDLE


def test_successful_reply_appends_one_assistant_turn():
    session = AssistantSession(_echo)
    assert asyncio.run(session.submit("  सबैभन्दा ठूलो ताल कुन हो?  ")) is True

    assert [(t.role, t.text) for t in session.turns] == [
        (Role.USER, "सबैभन्दा ठूलो ताल कुन हो?"),
        (Role.ASSISTANT, "उत्तर: सबैभन्दा ठूलो ताल कुन हो?"),
    ]
    assert session.state is SessionState.IDLE
    assert not session.is_typing


def test_failure_becomes_apology_turn_and_is_not_raised():
    session = AssistantSession(_broken)
    assert asyncio.run(session.submit("राराताल कहाँ छ?")) is True

    assert session.turns[-1].role is Role.ASSISTANT
    assert session.turns[-1].text == APOLOGY
    assert len(session.turns) == 2
    assert session.state is SessionState.IDLE


def test_apology_is_localized():
    session = AssistantSession(_broken, locale="en")
    asyncio.run(session.submit("Where is Rara Lake?"))
    assert session.turns[-1].text == "Sorry, I am having some trouble right now. Please try again later."


def test_empty_reply_is_replaced():
    async def silent(question):
        return "   "

    session = AssistantSession(silent)
    asyncio.run(session.submit("नमस्ते"))
    assert session.turns[-1].text == "माफ गर्नुहोस्, मैले त्यो अनुरोध प्रशोधन गर्न सकिन।"


def test_draft_is_used_and_cleared():
    session = AssistantSession(_echo)
    session.set_draft("मेची नदी")
    assert asyncio.run(session.submit()) is True
    assert session.draft == ""
    assert session.turns[0].text == "मेची नदी"


def test_second_submission_rejected_while_awaiting_reply():
    async def scenario():
        release = asyncio.Event()

        async def slow(question):
            await release.wait()
            return "कञ्चनजङ्घा"

        session = AssistantSession(slow)
        first = asyncio.create_task(session.submit("पूर्वको हिमाल?"))
        await asyncio.sleep(0)

        assert session.state is SessionState.AWAITING_REPLY
        assert session.is_typing
        assert await session.submit("अर्को प्रश्न") is False

        release.set()
        assert await first is True
        return session

    session = asyncio.run(scenario())
    assert [t.text for t in session.turns] == ["पूर्वको हिमाल?", "कञ्चनजङ्घा"]
    assert session.state is SessionState.IDLE


def test_reset_discards_reply_still_in_flight():
    async def scenario():
        release = asyncio.Event()

        async def slow(question):
            await release.wait()
            return "ढिलो उत्तर"

        session = AssistantSession(slow)
        pending = asyncio.create_task(session.submit("प्रश्न"))
        await asyncio.sleep(0)
        session.reset()
        release.set()
        await pending
        return session

    session = asyncio.run(scenario())
    assert session.turns == ()
    assert session.state is SessionState.IDLE


def test_snapshot_is_json_ready():
    session = AssistantSession(_echo)
    asyncio.run(session.submit("प्रश्न"))
    snapshot = session.snapshot()
    assert snapshot["state"] == "idle"
    assert snapshot["is_typing"] is False
    assert snapshot["turns"][0] == {"role": "user", "text": "प्रश्न"}


class _FakeResponse:
    def __init__(self, text):
        self.text = text


class _FakeModels:
    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def generate_content(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        return _FakeResponse(self.reply)


class _FakeClient:
    def __init__(self, models):
        self.models = models


def test_gemini_provider_frames_question_and_returns_text():
    models = _FakeModels(reply="रारा ताल कर्णालीमा छ।")
    provider = GeminiProvider(None, model="gemini-test", client=_FakeClient(models))

    assert asyncio.run(provider.ask("रारा ताल कहाँ छ?")) == "रारा ताल कर्णालीमा छ।"
    call = models.calls[0]
    assert call["model"] == "gemini-test"
    assert "रारा ताल कहाँ छ?" in call["contents"][0]["parts"][0]["text"]
    assert call["config"]["system_instruction"]


def test_gemini_provider_propagates_errors():
    models = _FakeModels(error=RuntimeError("429 RESOURCE_EXHAUSTED"))
    provider = GeminiProvider(None, client=_FakeClient(models))
    with pytest.raises(RuntimeError):
        asyncio.run(provider.ask("प्रश्न"))


def test_unconfigured_provider_fails_and_session_apologizes():
    provider = GeminiProvider(None)
    assert not provider.is_available
    with pytest.raises(ProviderUnavailable):
        asyncio.run(provider.ask("प्रश्न"))

    session = AssistantSession(provider.ask)
    asyncio.run(session.submit("प्रश्न"))
    assert session.turns[-1].text == APOLOGY


def test_cancelled_request_returns_session_to_idle():
    calls = []

    async def hangs_first_time(question):
        calls.append(question)
        if len(calls) == 1:
            await asyncio.Event().wait()
        return "दोस्रो उत्तर"

    async def scenario():
        session = AssistantSession(hangs_first_time)
        task = asyncio.create_task(session.submit("रोकिने प्रश्न"))
        await asyncio.sleep(0)
        assert session.state is SessionState.AWAITING_REPLY

        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        assert session.state is SessionState.IDLE
        assert [t.role for t in session.turns] == [Role.USER]

        assert await session.submit("अर्को प्रश्न") is True
        return session

    session = asyncio.run(scenario())
    assert [t.text for t in session.turns] == ["रोकिने प्रश्न", "अर्को प्रश्न", "दोस्रो उत्तर"]
