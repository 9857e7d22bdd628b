from .providers import GeminiProvider, LLMProvider, ProviderUnavailable, build_default_provider
from .session import AssistantSession, ConversationTurn, Role, SessionState

__all__ = [
    "GeminiProvider",
    "LLMProvider",
    "ProviderUnavailable",
    "build_default_provider",
    "AssistantSession",
    "ConversationTurn",
    "Role",
    "SessionState",
]
