"""Failure conditions surfaced by the Claude data readers."""

from pathlib import Path


class ClaudeDataError(Exception):
    """Base class for every reader failure returned to callers."""


class ClaudeNotFoundError(ClaudeDataError):
    """The requested data does not exist yet. Render as an empty state."""


class ProjectNotFoundError(ClaudeNotFoundError):
    def __init__(self, project_path: str):
        super().__init__(f"No Claude data found for project: {project_path}")
        self.project_path = project_path


class SessionNotFoundError(ClaudeNotFoundError):
    def __init__(self, session_id: str):
        super().__init__(f"Session not found: {session_id}")
        self.session_id = session_id


class ProjectsDirNotFoundError(ClaudeNotFoundError):
    pass


class StatsNotFoundError(ClaudeNotFoundError):
    pass


class ClaudeReadError(ClaudeDataError):
    """A file exists but could not be opened or read."""

    def __init__(self, message: str, path: Path | str):
        super().__init__(message)
        self.path = Path(path)


class StatsParseError(ClaudeDataError):
    """stats-cache.json is present but structurally invalid."""
