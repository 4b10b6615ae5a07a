"""QObject facade exposing Claude session and usage data to QML."""

import logging
from typing import Callable, Iterable

from PySide6.QtCore import QObject, Signal, Slot

from claude_dashboard.services.claude_paths import ClaudePaths
from claude_dashboard.services.config_manager import ConfigManager
from claude_dashboard.services.errors import ClaudeDataError, ClaudeNotFoundError
from claude_dashboard.services.session_aggregator import SessionAggregator
from claude_dashboard.services.stats_reader import load_stats, primary_model, total_tokens

logger = logging.getLogger(__name__)

DEFAULT_RECENT_LIMIT = 10


class ClaudeBridge(QObject):
    """Serializes session and stats queries into plain lists and dicts.

    Failures are reported through ``error_occurred`` and an empty result,
    so views can fall back to an empty state.
    """

    error_occurred = Signal(str)  # message

    def __init__(
        self,
        paths: ClaudePaths | None = None,
        tracked_projects: Callable[[], Iterable[str]] | None = None,
        config: ConfigManager | None = None,
        parent=None,
    ):
        super().__init__(parent)
        self._config = config
        self._paths = paths
        self._tracked_projects = tracked_projects or (lambda: [])

    def _current_paths(self) -> ClaudePaths:
        # Re-resolved per call so a changed claudeHome setting takes effect
        if self._paths is not None:
            return self._paths
        if self._config is not None:
            return self._config.claude_paths()
        return ClaudePaths.from_home()

    def _report(self, error: ClaudeDataError):
        if isinstance(error, ClaudeNotFoundError):
            logger.info("%s", error)
        else:
            logger.warning("%s", error)
        self.error_occurred.emit(str(error))

    @Slot(result=dict)
    def get_claude_stats(self) -> dict:
        try:
            return load_stats(self._current_paths()).to_dict()
        except ClaudeDataError as e:
            self._report(e)
            return {}

    @Slot(result=dict)
    def get_usage_summary(self) -> dict:
        try:
            stats = load_stats(self._current_paths())
        except ClaudeDataError as e:
            self._report(e)
            return {}
        return {
            "total_tokens": total_tokens(stats),
            "primary_model": primary_model(stats),
        }

    @Slot(str, result=list)
    def get_project_sessions(self, project_path: str) -> list:
        aggregator = SessionAggregator(self._current_paths())
        try:
            return [s.to_dict() for s in aggregator.project_sessions(project_path)]
        except ClaudeDataError as e:
            self._report(e)
            return []

    @Slot(int, result=list)
    def get_recent_sessions(self, limit: int) -> list:
        project_paths = list(self._tracked_projects())
        if not project_paths:
            return []
        if limit <= 0:
            limit = self._config.recent_session_limit() if self._config else DEFAULT_RECENT_LIMIT
        aggregator = SessionAggregator(self._current_paths())
        return [s.to_dict() for s in aggregator.sessions_for_projects(project_paths, limit)]

    @Slot(str, result=list)
    def get_session_messages(self, session_id: str) -> list:
        aggregator = SessionAggregator(self._current_paths())
        try:
            return [m.to_dict() for m in aggregator.session_messages(session_id)]
        except ClaudeDataError as e:
            self._report(e)
            return []

    @Slot(result=list)
    def list_projects(self) -> list:
        return [p.to_dict() for p in self._current_paths().list_projects()]
