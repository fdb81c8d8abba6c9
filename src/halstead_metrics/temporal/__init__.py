"""Per-revision analysis of a file's git history."""

from .git_history import GitHistoryRunner
from .models import HistoryPoint, Revision

__all__ = ["GitHistoryRunner", "HistoryPoint", "Revision"]
