"""Group transcript messages into per-session summaries."""

import logging
from collections import defaultdict
from datetime import datetime, timezone
from pathlib import Path

from claude_dashboard.services.claude_paths import ClaudePaths
from claude_dashboard.services.errors import (
    ClaudeDataError,
    ClaudeReadError,
    ProjectNotFoundError,
    ProjectsDirNotFoundError,
    SessionNotFoundError,
)
from claude_dashboard.services.jsonl_parser import parse_session_file
from claude_dashboard.types import ClaudeMessage, ClaudeSession, MessageType
from claude_dashboard.utils.path_codec import extract_project_name

logger = logging.getLogger(__name__)

FIRST_MESSAGE_MAX_LEN = 100
NO_MESSAGES = "No messages"


class SessionAggregator:
    """Reads session summaries and messages from a Claude home directory.

    Every call re-reads the transcripts from disk.
    """

    def __init__(self, paths: ClaudePaths):
        self._paths = paths

    def project_sessions(self, project_path: str) -> list[ClaudeSession]:
        """All sessions of one project, most recently active first.

        Raises ProjectNotFoundError when the project has no log directory.
        """
        project_dir = self._paths.find_project_dir(project_path)
        if project_dir is None:
            raise ProjectNotFoundError(project_path)

        session_messages: dict[str, list[ClaudeMessage]] = defaultdict(list)
        session_mtime: dict[str, float] = {}

        for jsonl_file in _jsonl_files(project_dir):
            mtime = _file_mtime(jsonl_file)
            try:
                messages = parse_session_file(jsonl_file)
            except ClaudeReadError as e:
                logger.warning("Skipping %s: %s", jsonl_file.name, e)
                continue

            for msg in messages:
                session_messages[msg.session_id].append(msg)
                if mtime is not None and mtime > session_mtime.get(msg.session_id, float("-inf")):
                    session_mtime[msg.session_id] = mtime

        sessions = []
        for session_id, messages in session_messages.items():
            session = summarize_session(session_id, project_path, messages)
            # File mtime beats content timestamps for recency
            if session_id in session_mtime:
                session.last_activity = format_mtime(session_mtime[session_id])
            sessions.append(session)

        sessions.sort(key=lambda s: s.last_activity, reverse=True)
        return sessions

    def sessions_for_projects(self, project_paths: list[str], limit: int) -> list[ClaudeSession]:
        """The ``limit`` most recently active sessions across the given projects.

        Projects without readable data are skipped.
        """
        all_sessions = []
        for project_path in project_paths:
            try:
                all_sessions.extend(self.project_sessions(project_path))
            except ClaudeDataError as e:
                logger.debug("No sessions for %s: %s", project_path, e)

        all_sessions.sort(key=lambda s: s.last_activity, reverse=True)
        return all_sessions[:max(limit, 0)]

    def session_messages(self, session_id: str) -> list[ClaudeMessage]:
        """Messages of one session, sorted by timestamp.

        Project directories are searched in order; the first one holding the
        session has every one of its transcript files merged, so a session
        resumed into a new file comes back whole.
        """
        projects_dir = self._paths.projects_dir
        if projects_dir is None or not projects_dir.exists():
            raise ProjectsDirNotFoundError("Claude projects directory not found")

        for project_dir in self._paths.project_dirs():
            found = []
            for jsonl_file in _jsonl_files(project_dir):
                try:
                    messages = parse_session_file(jsonl_file)
                except ClaudeReadError as e:
                    logger.warning("Skipping %s: %s", jsonl_file.name, e)
                    continue
                found.extend(m for m in messages if m.session_id == session_id)
            if found:
                found.sort(key=lambda m: m.timestamp)
                return found

        raise SessionNotFoundError(session_id)


def summarize_session(session_id: str, project_path: str, messages: list[ClaudeMessage]) -> ClaudeSession:
    """Build a summary from a non-empty group of messages."""
    ordered = sorted(messages, key=lambda m: m.timestamp)

    first_user = next((m for m in ordered if m.msg_type == MessageType.USER), None)
    first_message = truncate_message(first_user.content) if first_user else NO_MESSAGES

    model = next((m.model for m in ordered if m.model), None)

    return ClaudeSession(
        id=session_id,
        project_path=project_path,
        project_name=extract_project_name(project_path),
        first_message=first_message,
        message_count=len(ordered),
        total_tokens=sum(m.total_tokens for m in ordered),
        model=model,
        started_at=ordered[0].timestamp,
        last_activity=ordered[-1].timestamp,
    )


def truncate_message(text: str, max_len: int = FIRST_MESSAGE_MAX_LEN) -> str:
    """Trim, turn newlines into spaces and cut to ``max_len`` with an ellipsis."""
    text = text.strip().replace("\n", " ")
    if len(text) <= max_len:
        return text
    return text[:max_len] + "..."


def format_mtime(mtime: float) -> str:
    """Whole-second UTC RFC 3339 timestamp, e.g. 2026-10-19T08:30:00+00:00."""
    return datetime.fromtimestamp(int(mtime), tz=timezone.utc).isoformat()


def _jsonl_files(directory: Path) -> list[Path]:
    try:
        return sorted(p for p in directory.glob("*.jsonl") if p.is_file())
    except OSError:
        logger.warning("Could not list %s", directory, exc_info=True)
        return []


def _file_mtime(path: Path) -> float | None:
    try:
        return path.stat().st_mtime
    except OSError:
        return None
