"""Use cases for search and discovery."""

from .search import (
    SearchResults,
    TrendingTopic,
    list_trending_posts,
    list_trending_topics,
    search_all,
    search_posts,
    search_users,
)

__all__ = [
    "SearchResults",
    "TrendingTopic",
    "list_trending_posts",
    "list_trending_topics",
    "search_all",
    "search_posts",
    "search_users",
]
