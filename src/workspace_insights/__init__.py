"""Text analysis and cross-record relevance ranking for a personal workspace."""

from .analysis import analyze
from .search import search

__version__ = "0.1.0"

__all__ = ["analyze", "search"]
