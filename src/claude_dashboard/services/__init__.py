"""Services for Claude Dashboard."""

from claude_dashboard.services.claude_paths import ClaudePaths
from claude_dashboard.services.session_aggregator import SessionAggregator
from claude_dashboard.services.stats_reader import load_stats, primary_model, total_tokens
from claude_dashboard.services.config_manager import ConfigManager
from claude_dashboard.services.claude_bridge import ClaudeBridge

__all__ = [
    "ClaudePaths",
    "SessionAggregator",
    "load_stats",
    "primary_model",
    "total_tokens",
    "ConfigManager",
    "ClaudeBridge",
]
