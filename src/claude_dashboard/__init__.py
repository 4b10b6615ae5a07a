"""Claude Dashboard — session and usage views over Claude Code's local logs."""

__version__ = "0.1.0"
