"""Locate Claude Code's home directory and the files inside it."""

import logging
from dataclasses import dataclass
from pathlib import Path

from claude_dashboard.types import ClaudeProject
from claude_dashboard.utils.path_codec import decode_path, encode_path, extract_project_name

logger = logging.getLogger(__name__)

CLAUDE_DIR_NAME = ".claude"


@dataclass(frozen=True)
class ClaudePaths:
    """Resolved locations under a Claude home directory.

    A ``claude_home`` of None means the home directory is unavailable;
    every derived path is then None as well.
    """
    claude_home: Path | None

    @classmethod
    def from_home(cls, home: str | Path | None = None) -> "ClaudePaths":
        if home is None:
            try:
                home = Path.home()
            except (RuntimeError, KeyError):
                logger.warning("Could not determine the user's home directory")
                return cls(None)
        return cls(Path(home) / CLAUDE_DIR_NAME)

    def _join(self, *parts: str) -> Path | None:
        if self.claude_home is None:
            return None
        return self.claude_home.joinpath(*parts)

    @property
    def projects_dir(self) -> Path | None:
        return self._join("projects")

    @property
    def stats_cache_path(self) -> Path | None:
        return self._join("stats-cache.json")

    @property
    def settings_path(self) -> Path | None:
        return self._join("settings.json")

    @property
    def history_path(self) -> Path | None:
        return self._join("history.jsonl")

    def find_project_dir(self, project_path: str) -> Path | None:
        """Return the log directory for a project path, or None if there is none on disk."""
        projects_dir = self.projects_dir
        if projects_dir is None:
            return None
        project_dir = projects_dir / encode_path(project_path)
        if not project_dir.exists():
            logger.debug("No Claude project directory for %s", project_path)
            return None
        return project_dir

    def project_dirs(self) -> list[Path]:
        """Immediate subdirectories of the projects directory. Never raises."""
        projects_dir = self.projects_dir
        if projects_dir is None or not projects_dir.is_dir():
            return []
        try:
            entries = sorted(projects_dir.iterdir())
        except OSError:
            logger.warning("Could not read projects directory %s", projects_dir, exc_info=True)
            return []
        dirs = []
        for entry in entries:
            try:
                if entry.is_dir():
                    dirs.append(entry)
            except OSError:
                continue
        return dirs

    def list_projects(self) -> list[ClaudeProject]:
        """Every known project, decoded back to its filesystem path."""
        projects = []
        for entry in self.project_dirs():
            name = entry.name
            try:
                name.encode("utf-8")
            except UnicodeEncodeError:
                # Undecodable bytes survive as surrogates; not representable as text
                continue
            decoded = decode_path(name)
            projects.append(ClaudeProject(
                path=decoded,
                name=extract_project_name(decoded),
                log_dir=str(entry),
            ))
        return projects
