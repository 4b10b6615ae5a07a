"""Typed view of the stats-cache.json aggregate document."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class DailyActivity:
    date: str
    message_count: int = 0
    session_count: int = 0
    tool_call_count: int = 0

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "messageCount": self.message_count,
            "sessionCount": self.session_count,
            "toolCallCount": self.tool_call_count,
        }


@dataclass(frozen=True)
class DailyModelTokens:
    date: str
    tokens_by_model: dict[str, int] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return sum(self.tokens_by_model.values())


@dataclass(frozen=True)
class ModelUsage:
    input_tokens: int = 0
    output_tokens: int = 0
    cache_read_input_tokens: int = 0
    cache_creation_input_tokens: int = 0
    web_search_requests: int = 0
    cost_usd: float = 0.0

    def to_dict(self) -> dict:
        return {
            "inputTokens": self.input_tokens,
            "outputTokens": self.output_tokens,
            "cacheReadInputTokens": self.cache_read_input_tokens,
            "cacheCreationInputTokens": self.cache_creation_input_tokens,
            "webSearchRequests": self.web_search_requests,
            "costUsd": self.cost_usd,
        }


@dataclass(frozen=True)
class LongestSession:
    session_id: str
    duration: int = 0  # milliseconds
    message_count: int = 0
    timestamp: str = ""

    def to_dict(self) -> dict:
        return {
            "sessionId": self.session_id,
            "duration": self.duration,
            "messageCount": self.message_count,
            "timestamp": self.timestamp,
        }


@dataclass
class ClaudeStats:
    """Normalized stats with the derived "today" figures always present."""
    total_sessions: int
    total_messages: int
    last_computed: str
    first_session_date: Optional[str] = None
    daily_activity: list[DailyActivity] = field(default_factory=list)
    model_usage: dict[str, ModelUsage] = field(default_factory=dict)
    longest_session: Optional[LongestSession] = None
    tokens_today: int = 0
    messages_today: int = 0
    sessions_today: int = 0

    def to_dict(self) -> dict:
        return {
            "total_sessions": self.total_sessions,
            "total_messages": self.total_messages,
            "last_computed": self.last_computed,
            "first_session_date": self.first_session_date,
            "daily_activity": [a.to_dict() for a in self.daily_activity],
            "model_usage": {name: u.to_dict() for name, u in self.model_usage.items()},
            "longest_session": self.longest_session.to_dict() if self.longest_session else None,
            "tokens_today": self.tokens_today,
            "messages_today": self.messages_today,
            "sessions_today": self.sessions_today,
        }
