"""Read and normalize Claude Code's stats-cache.json."""

import logging
from datetime import datetime, timezone

import orjson

from claude_dashboard.services.claude_paths import ClaudePaths
from claude_dashboard.services.errors import (
    ClaudeReadError,
    StatsNotFoundError,
    StatsParseError,
)
from claude_dashboard.types import (
    ClaudeStats,
    DailyActivity,
    DailyModelTokens,
    LongestSession,
    ModelUsage,
)

logger = logging.getLogger(__name__)


def load_stats(paths: ClaudePaths, now: datetime | None = None) -> ClaudeStats:
    """Load stats-cache.json and derive today's message, session and token counts.

    "Today" is the UTC calendar date of ``now`` (defaults to the current time).
    """
    stats_path = paths.stats_cache_path
    if stats_path is None:
        raise StatsNotFoundError("Could not find Claude home directory")
    if not stats_path.exists():
        raise StatsNotFoundError("stats-cache.json not found")

    try:
        content = stats_path.read_bytes()
    except OSError as e:
        raise ClaudeReadError(f"Failed to read stats-cache.json: {e}", stats_path) from e

    try:
        raw = orjson.loads(content)
        stats = _decode_stats(raw, _utc_today(now))
    except (orjson.JSONDecodeError, TypeError, ValueError) as e:
        raise StatsParseError(f"Failed to parse stats-cache.json: {e}") from e

    logger.debug(
        "Loaded stats: %d sessions, %d messages, %d models",
        stats.total_sessions, stats.total_messages, len(stats.model_usage),
    )
    return stats


def total_tokens(stats: ClaudeStats) -> int:
    """Input plus output tokens over every model; cache tokens and cost are excluded."""
    return sum(u.input_tokens + u.output_tokens for u in stats.model_usage.values())


def primary_model(stats: ClaudeStats) -> str | None:
    """The model with the most output tokens.

    Ties are unordered: whichever tied model the mapping yields first wins.
    """
    if not stats.model_usage:
        return None
    return max(stats.model_usage.items(), key=lambda item: item[1].output_tokens)[0]


def _utc_today(now: datetime | None) -> str:
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return now.strftime("%Y-%m-%d")


def _decode_stats(raw, today: str) -> ClaudeStats:
    obj = _as_object(raw, "stats-cache.json")

    daily_activity = [_decode_daily_activity(a) for a in _as_list(obj, "dailyActivity")]
    daily_tokens = [_decode_daily_tokens(d) for d in _as_list(obj, "dailyModelTokens")]
    model_usage = {
        _as_text(name, "modelUsage key"): _decode_model_usage(usage)
        for name, usage in _optional_object(obj, "modelUsage").items()
    }
    longest = obj.get("longestSession")
    last_computed = _optional_text(obj, "lastComputedDate")

    today_activity = next((a for a in daily_activity if a.date == today), None)
    today_tokens = next((d for d in daily_tokens if d.date == today), None)

    return ClaudeStats(
        total_sessions=_count(obj, "totalSessions"),
        total_messages=_count(obj, "totalMessages"),
        last_computed=today if last_computed is None else last_computed,
        first_session_date=_optional_text(obj, "firstSessionDate"),
        daily_activity=daily_activity,
        model_usage=model_usage,
        longest_session=_decode_longest_session(longest) if longest is not None else None,
        tokens_today=today_tokens.total if today_tokens else 0,
        messages_today=today_activity.message_count if today_activity else 0,
        sessions_today=today_activity.session_count if today_activity else 0,
    )


def _decode_daily_activity(raw) -> DailyActivity:
    obj = _as_object(raw, "dailyActivity entry")
    return DailyActivity(
        date=_optional_text(obj, "date") or "",
        message_count=_count(obj, "messageCount"),
        session_count=_count(obj, "sessionCount"),
        tool_call_count=_count(obj, "toolCallCount"),
    )


def _decode_daily_tokens(raw) -> DailyModelTokens:
    obj = _as_object(raw, "dailyModelTokens entry")
    tokens = _optional_object(obj, "tokensByModel")
    return DailyModelTokens(
        date=_optional_text(obj, "date") or "",
        tokens_by_model={name: _count(tokens, name) for name in tokens},
    )


def _decode_model_usage(raw) -> ModelUsage:
    obj = _as_object(raw, "modelUsage entry")
    cost = obj.get("costUsd")
    if cost is None:
        cost = 0.0
    elif isinstance(cost, bool) or not isinstance(cost, (int, float)):
        raise TypeError(f"costUsd must be a number, got {type(cost).__name__}")
    return ModelUsage(
        input_tokens=_count(obj, "inputTokens"),
        output_tokens=_count(obj, "outputTokens"),
        cache_read_input_tokens=_count(obj, "cacheReadInputTokens"),
        cache_creation_input_tokens=_count(obj, "cacheCreationInputTokens"),
        web_search_requests=_count(obj, "webSearchRequests"),
        cost_usd=float(cost),
    )


def _decode_longest_session(raw) -> LongestSession:
    obj = _as_object(raw, "longestSession")
    return LongestSession(
        session_id=_optional_text(obj, "sessionId") or "",
        duration=_count(obj, "duration"),
        message_count=_count(obj, "messageCount"),
        timestamp=_optional_text(obj, "timestamp") or "",
    )


# Field helpers: absent or null means zero/empty, a wrong type is a parse error.

def _as_object(value, what: str) -> dict:
    if not isinstance(value, dict):
        raise TypeError(f"{what} must be an object, got {type(value).__name__}")
    return value


def _optional_object(obj: dict, key: str) -> dict:
    value = obj.get(key)
    if value is None:
        return {}
    return _as_object(value, key)


def _as_list(obj: dict, key: str) -> list:
    value = obj.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"{key} must be an array, got {type(value).__name__}")
    return value


def _as_text(value, what: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{what} must be a string, got {type(value).__name__}")
    return value


def _optional_text(obj: dict, key: str) -> str | None:
    value = obj.get(key)
    if value is None:
        return None
    return _as_text(value, key)


def _count(obj: dict, key: str) -> int:
    value = obj.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{key} must be a non-negative integer, got {value!r}")
    return value
