"""Type definitions for Claude Dashboard."""

from claude_dashboard.types.messages import ClaudeMessage, MessageType
from claude_dashboard.types.sessions import ClaudeProject, ClaudeSession
from claude_dashboard.types.stats import (
    ClaudeStats,
    DailyActivity,
    DailyModelTokens,
    LongestSession,
    ModelUsage,
)

__all__ = [
    "ClaudeMessage",
    "MessageType",
    "ClaudeProject",
    "ClaudeSession",
    "ClaudeStats",
    "DailyActivity",
    "DailyModelTokens",
    "LongestSession",
    "ModelUsage",
]
