"""Session layer for loading grids and running searches."""

from .models import SessionConfig, WordResult, SearchReport
from .session import WordSearchSession

__all__ = [
    "SessionConfig",
    "WordResult",
    "SearchReport",
    "WordSearchSession",
]
