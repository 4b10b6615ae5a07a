"""JSONL parser for Claude Code transcript files."""

import logging
from pathlib import Path
from typing import Iterator

import orjson

from claude_dashboard.services.errors import ClaudeReadError
from claude_dashboard.types.messages import ClaudeMessage, MessageType

logger = logging.getLogger(__name__)

# Max size for a single JSONL line (10MB)
MAX_LINE_SIZE = 10 * 1024 * 1024


def parse_session_file(file_path: str | Path) -> list[ClaudeMessage]:
    """Parse a JSONL transcript into messages sorted by timestamp.

    Undecodable lines are dropped. Raises ClaudeReadError when the file
    itself cannot be opened or read.
    """
    path = Path(file_path)
    try:
        messages = list(_stream_lines(path))
    except OSError as e:
        raise ClaudeReadError(f"Failed to open session file: {e}", path) from e
    messages.sort(key=lambda m: m.timestamp)
    return messages


def _stream_lines(path: Path) -> Iterator[ClaudeMessage]:
    line_num = 0
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        for line in f:
            line_num += 1
            line = line.strip()
            if not line:
                continue

            if len(line) > MAX_LINE_SIZE:
                logger.warning(
                    "Line %d in %s exceeds %dMB, skipping",
                    line_num, path.name, MAX_LINE_SIZE // (1024 * 1024),
                )
                continue

            msg = parse_message_line(line)
            if msg is None:
                logger.debug("Skipped line %d in %s", line_num, path.name)
                continue
            yield msg


def parse_message_line(line: str) -> ClaudeMessage | None:
    """Decode one transcript line, or return None if it is not a user/assistant message."""
    try:
        raw = orjson.loads(line)
    except orjson.JSONDecodeError:
        return None
    if not isinstance(raw, dict):
        return None

    uuid = raw.get("uuid")
    if not isinstance(uuid, str):
        return None

    try:
        msg_type = MessageType(raw.get("type"))
    except (ValueError, TypeError):
        return None

    parent_uuid = raw.get("parentUuid")
    session_id = raw.get("sessionId")
    timestamp = raw.get("timestamp")
    if not all(isinstance(v, (str, type(None))) for v in (parent_uuid, session_id, timestamp)):
        return None

    content = ""
    model = None
    input_tokens = output_tokens = None
    message = raw.get("message")
    if isinstance(message, dict):
        content = extract_content(message)
        if isinstance(message.get("model"), str):
            model = message["model"]
        input_tokens, output_tokens = extract_tokens(message)

    return ClaudeMessage(
        uuid=uuid,
        parent_uuid=parent_uuid,
        session_id=session_id or "",
        msg_type=msg_type,
        content=content,
        model=model,
        input_tokens=input_tokens,
        output_tokens=output_tokens,
        timestamp=timestamp or "",
    )


def extract_content(message: dict) -> str:
    """Free text of a message payload.

    A string is returned verbatim; a block list yields the text of its
    "text" blocks joined by newlines. Anything else is empty.
    """
    content = message.get("content")
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        texts = []
        for block in content:
            if not isinstance(block, dict) or block.get("type") != "text":
                continue
            text = block.get("text")
            if isinstance(text, str):
                texts.append(text)
        return "\n".join(texts)
    return ""


def extract_tokens(message: dict) -> tuple[int | None, int | None]:
    usage = message.get("usage")
    if not isinstance(usage, dict):
        return None, None
    return _as_count(usage.get("input_tokens")), _as_count(usage.get("output_tokens"))


def _as_count(value) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return None
    return value
