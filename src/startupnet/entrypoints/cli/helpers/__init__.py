"""Small presentation helpers shared by the CLI commands."""

from .db_url import sanitize_url
from .messages import error, success, warn

__all__ = ["sanitize_url", "error", "success", "warn"]
