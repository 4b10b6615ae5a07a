"""Encode and decode Claude Code project path ↔ directory name."""

SEPARATOR = "/"
FLATTEN_CHAR = "-"


def encode_path(path: str) -> str:
    """Encode a filesystem path to a Claude project directory name.

    /home/wiz/AI/LLM → -home-wiz-AI-LLM
    """
    return path.replace(SEPARATOR, FLATTEN_CHAR)


def decode_path(encoded: str) -> str:
    """Decode a Claude project directory name to a filesystem path.

    -home-wiz-AI-LLM → /home/wiz/AI/LLM

    Hyphens that were part of a segment name cannot be told apart from
    separators, so they decode to separators as well.
    """
    if encoded.startswith(FLATTEN_CHAR):
        # Leading hyphen becomes the root separator first
        encoded = SEPARATOR + encoded[len(FLATTEN_CHAR):]
    return encoded.replace(FLATTEN_CHAR, SEPARATOR)


def extract_project_name(project_path: str) -> str:
    """Get the last path segment as the project display name.

    /home/wiz/AI/LLM → LLM
    """
    return project_path.rsplit(SEPARATOR, 1)[-1]
