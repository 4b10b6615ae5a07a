"""Session summary types."""

from dataclasses import dataclass, asdict
from typing import Optional


@dataclass
class ClaudeSession:
    id: str
    project_path: str
    project_name: str
    first_message: str
    message_count: int
    total_tokens: int
    model: Optional[str]
    started_at: str
    last_activity: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ClaudeProject:
    path: str         # Decoded filesystem path
    name: str         # Last path segment
    log_dir: str      # Encoded log directory on disk

    def to_dict(self) -> dict:
        return asdict(self)
