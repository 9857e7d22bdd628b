"""
Assistant conversation state machine.

    idle --submit(text)--> awaiting-reply --reply / failure--> idle

Only one request may be outstanding: submissions made while awaiting a reply are
rejected, not queued. Remote failures never escape `submit`; they are logged and
turned into a localized apology turn.
"""

import asyncio
import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple

from geography.strings import resolve_locale, text

logger = logging.getLogger(__name__)

AskFn = Callable[[str], Awaitable[str]]


class SessionState(str, Enum):
    IDLE = "idle"
    AWAITING_REPLY = "awaiting-reply"


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class ConversationTurn:
    role: Role
    text: str

    def to_dict(self) -> Dict[str, str]:
        return {"role": self.role.value, "text": self.text}


class AssistantSession:
    def __init__(self, ask: AskFn, locale: str = None):
        self._ask = ask
        self.locale = resolve_locale(locale)
        self._turns: List[ConversationTurn] = []
        self._state = SessionState.IDLE
        self._generation = 0
        self._lock = threading.Lock()
        self.draft = ""

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def turns(self) -> Tuple[ConversationTurn, ...]:
        return tuple(self._turns)

    @property
    def is_typing(self) -> bool:
        return self._state is SessionState.AWAITING_REPLY

    def set_draft(self, value: str) -> None:
        self.draft = value or ""

    def _begin(self, raw: str) -> Optional[Tuple[str, int]]:
        question = (raw or "").strip()
        with self._lock:
            if self._state is not SessionState.IDLE:
                logger.info("Submission ignored: a reply is still pending")
                return None
            if not question:
                return None
            self._turns.append(ConversationTurn(Role.USER, question))
            self.draft = ""
            self._state = SessionState.AWAITING_REPLY
            return question, self._generation

    def _finish(self, reply: str, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                # session was restarted while this request was in flight
                logger.info("Discarding reply for a session that has been reset")
                return
            self._turns.append(ConversationTurn(Role.ASSISTANT, reply))
            self._state = SessionState.IDLE

    def _abandon(self, generation: int) -> None:
        with self._lock:
            if generation == self._generation:
                self._state = SessionState.IDLE

    async def submit(self, value: Optional[str] = None) -> bool:
        """
        Send `value` (or the current draft) to the assistant.
        Returns False when nothing was sent: blank text, or a reply is already pending.
        """
        started = self._begin(self.draft if value is None else value)
        if started is None:
            return False
        question, generation = started

        try:
            reply = await self._ask(question)
        except asyncio.CancelledError:
            # cancelled: back to idle, no reply turn
            self._abandon(generation)
            raise
        except Exception as e:
            logger.error(f"Assistant request failed: {e}")
            reply = text("assistant_apology", self.locale)
        else:
            if not reply or not reply.strip():
                reply = text("assistant_empty_reply", self.locale)

        self._finish(reply, generation)
        return True

    def reset(self) -> None:
        """Restart the session: empty log, empty draft, idle."""
        with self._lock:
            self._generation += 1
            self._turns.clear()
            self.draft = ""
            self._state = SessionState.IDLE

    def snapshot(self) -> Dict[str, Any]:
        return {
            "state": self._state.value,
            "is_typing": self.is_typing,
            "turns": [turn.to_dict() for turn in self._turns],
            "welcome": text("assistant_welcome", self.locale),
        }
