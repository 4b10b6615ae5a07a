"""Shared test helpers."""

import json
import os
from pathlib import Path

PROJECT_PATH = "/home/wiz/projects/myapp"
PROJECT_DIR_NAME = "-home-wiz-projects-myapp"


def record(uuid: str, session_id: str, msg_type: str = "user", timestamp: str = "",
           content="", model: str | None = None, usage: dict | None = None) -> dict:
    """Build a raw transcript record the way Claude Code writes it."""
    message = {"role": msg_type, "content": content}
    if model is not None:
        message["model"] = model
    if usage is not None:
        message["usage"] = usage
    return {
        "uuid": uuid,
        "parentUuid": None,
        "sessionId": session_id,
        "type": msg_type,
        "timestamp": timestamp,
        "cwd": "/home/wiz/projects/myapp",
        "message": message,
    }


def write_jsonl(path: Path, records: list[dict], mtime: float | None = None) -> Path:
    path.write_text("".join(json.dumps(r) + "\n" for r in records), encoding="utf-8")
    if mtime is not None:
        os.utime(path, (mtime, mtime))
    return path
