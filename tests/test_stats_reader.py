"""Tests for claude_dashboard.services.stats_reader."""

import json
from datetime import datetime, timezone, timedelta

import pytest

from claude_dashboard.services.claude_paths import ClaudePaths
from claude_dashboard.services.errors import StatsNotFoundError, StatsParseError
from claude_dashboard.services.stats_reader import load_stats, primary_model, total_tokens
from claude_dashboard.types import ClaudeStats, ModelUsage

FIXTURE_TODAY = datetime(2026, 2, 14, 18, 30, tzinfo=timezone.utc)


def _write_stats(paths: ClaudePaths, data) -> None:
    text = data if isinstance(data, str) else json.dumps(data)
    paths.stats_cache_path.write_text(text, encoding="utf-8")


# ---------------------------------------------------------------------------
# 1. Full document
# ---------------------------------------------------------------------------

def test_load_fixture(claude_paths, installed_stats):
    stats = load_stats(claude_paths, now=FIXTURE_TODAY)

    assert stats.total_sessions == 4
    assert stats.total_messages == 47
    assert stats.last_computed == "2026-02-14"
    assert stats.first_session_date == "2026-02-13T12:00:00.000Z"
    assert [a.date for a in stats.daily_activity] == ["2026-02-13", "2026-02-14"]
    assert stats.daily_activity[0].tool_call_count == 17
    assert stats.longest_session.session_id == "sess-simple"
    assert stats.longest_session.duration == 120000

    sonnet = stats.model_usage["claude-sonnet-4-5"]
    assert sonnet.cache_read_input_tokens == 250000
    assert sonnet.web_search_requests == 2
    assert sonnet.cost_usd == 1.25


# ---------------------------------------------------------------------------
# 2. Today window
# ---------------------------------------------------------------------------

def test_today_window(claude_paths, installed_stats):
    stats = load_stats(claude_paths, now=FIXTURE_TODAY)

    assert stats.messages_today == 5
    assert stats.sessions_today == 1
    assert stats.tokens_today == 1000


def test_today_uses_utc_date(claude_paths, installed_stats):
    # 2026-02-15 01:00 at UTC+5 is still 2026-02-14 in UTC
    local = datetime(2026, 2, 15, 1, 0, tzinfo=timezone(timedelta(hours=5)))
    assert load_stats(claude_paths, now=local).messages_today == 5


def test_no_entry_for_today(claude_paths, installed_stats):
    stats = load_stats(claude_paths, now=datetime(2026, 5, 1, tzinfo=timezone.utc))

    assert stats.messages_today == 0
    assert stats.sessions_today == 0
    assert stats.tokens_today == 0


def test_today_defaults_to_now(claude_paths):
    today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
    _write_stats(claude_paths, {
        "dailyActivity": [{"date": today, "messageCount": 5, "sessionCount": 2, "toolCallCount": 0}],
        "dailyModelTokens": [{"date": today, "tokensByModel": {"a": 7, "b": 3}}],
    })

    stats = load_stats(claude_paths)

    assert stats.messages_today == 5
    assert stats.sessions_today == 2
    assert stats.tokens_today == 10
    assert stats.last_computed == today


# ---------------------------------------------------------------------------
# 3. Zero defaults
# ---------------------------------------------------------------------------

def test_empty_document(claude_paths):
    _write_stats(claude_paths, {})
    stats = load_stats(claude_paths, now=FIXTURE_TODAY)

    assert stats.total_sessions == 0
    assert stats.total_messages == 0
    assert stats.last_computed == "2026-02-14"
    assert stats.first_session_date is None
    assert stats.daily_activity == []
    assert stats.model_usage == {}
    assert stats.longest_session is None
    assert stats.tokens_today == 0


def test_missing_model_fields_default_to_zero(claude_paths):
    _write_stats(claude_paths, {"modelUsage": {"m": {"inputTokens": 10}}})
    usage = load_stats(claude_paths, now=FIXTURE_TODAY).model_usage["m"]

    assert usage == ModelUsage(input_tokens=10)
    assert usage.cost_usd == 0.0


def test_empty_last_computed_kept(claude_paths):
    _write_stats(claude_paths, {"lastComputedDate": ""})
    assert load_stats(claude_paths, now=FIXTURE_TODAY).last_computed == ""


def test_null_last_computed_falls_back_to_today(claude_paths):
    _write_stats(claude_paths, {"lastComputedDate": None, "modelUsage": None})
    stats = load_stats(claude_paths, now=FIXTURE_TODAY)
    assert stats.last_computed == "2026-02-14"
    assert stats.model_usage == {}


def test_integer_cost_becomes_float(claude_paths):
    _write_stats(claude_paths, {"modelUsage": {"m": {"costUsd": 3}}})
    cost = load_stats(claude_paths, now=FIXTURE_TODAY).model_usage["m"].cost_usd
    assert cost == 3.0
    assert isinstance(cost, float)


def test_unknown_fields_tolerated(claude_paths):
    _write_stats(claude_paths, {"version": 2, "hourCounts": {"3": 1}, "somethingNew": [1, 2]})
    assert load_stats(claude_paths, now=FIXTURE_TODAY).total_sessions == 0


# ---------------------------------------------------------------------------
# 4. Failures
# ---------------------------------------------------------------------------

def test_missing_file(claude_paths):
    with pytest.raises(StatsNotFoundError, match="stats-cache.json not found"):
        load_stats(claude_paths)


def test_home_unavailable():
    with pytest.raises(StatsNotFoundError, match="Could not find Claude home directory"):
        load_stats(ClaudePaths(None))


def test_invalid_json(claude_paths):
    _write_stats(claude_paths, "{not json")
    with pytest.raises(StatsParseError, match="Failed to parse stats-cache.json"):
        load_stats(claude_paths)


@pytest.mark.parametrize("document", [
    [],
    {"dailyActivity": {"date": "2026-02-14"}},
    {"modelUsage": [{"inputTokens": 1}]},
    {"totalSessions": "four"},
    {"modelUsage": {"m": {"costUsd": "free"}}},
    {"longestSession": "sess-1"},
    {"modelUsage": []},
    {"modelUsage": 0},
    {"dailyModelTokens": [{"date": "2026-02-14", "tokensByModel": []}]},
])
def test_wrong_structure(claude_paths, document):
    _write_stats(claude_paths, document)
    with pytest.raises(StatsParseError):
        load_stats(claude_paths)


# ---------------------------------------------------------------------------
# 5. Serialization
# ---------------------------------------------------------------------------

def test_to_dict_shape(claude_paths, installed_stats):
    data = load_stats(claude_paths, now=FIXTURE_TODAY).to_dict()

    assert set(data) == {
        "total_sessions", "total_messages", "last_computed", "first_session_date",
        "daily_activity", "model_usage", "longest_session",
        "tokens_today", "messages_today", "sessions_today",
    }
    assert data["daily_activity"][1] == {
        "date": "2026-02-14", "messageCount": 5, "sessionCount": 1, "toolCallCount": 2,
    }
    assert data["model_usage"]["claude-opus-4-1"] == {
        "inputTokens": 300,
        "outputTokens": 800,
        "cacheReadInputTokens": 0,
        "cacheCreationInputTokens": 0,
        "webSearchRequests": 0,
        "costUsd": 0.0,
    }
    assert data["longest_session"] == {
        "sessionId": "sess-simple",
        "duration": 120000,
        "messageCount": 42,
        "timestamp": "2026-02-13T12:00:00.000Z",
    }


# ---------------------------------------------------------------------------
# 6. Reporting helpers
# ---------------------------------------------------------------------------

def _stats(**usage: ModelUsage) -> ClaudeStats:
    return ClaudeStats(total_sessions=0, total_messages=0, last_computed="", model_usage=usage)


def test_total_tokens_ignores_cache_and_cost():
    stats = _stats(
        a=ModelUsage(input_tokens=10, output_tokens=20, cache_read_input_tokens=999, cost_usd=5.0),
        b=ModelUsage(input_tokens=1, output_tokens=2, cache_creation_input_tokens=999),
    )
    assert total_tokens(stats) == 33


def test_total_tokens_empty():
    assert total_tokens(_stats()) == 0


def test_primary_model_by_output_tokens():
    stats = _stats(
        big_input=ModelUsage(input_tokens=10_000, output_tokens=5),
        big_output=ModelUsage(input_tokens=1, output_tokens=500),
    )
    assert primary_model(stats) == "big_output"


def test_primary_model_tie_picks_one_of_tied():
    stats = _stats(a=ModelUsage(output_tokens=7), b=ModelUsage(output_tokens=7), c=ModelUsage())
    assert primary_model(stats) in {"a", "b"}


def test_primary_model_empty():
    assert primary_model(_stats()) is None
