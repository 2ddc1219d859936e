"""Search and trending schemas."""

from pydantic import BaseModel, ConfigDict

from .post import PostRead
from .user import UserRead


class SearchResultsRead(BaseModel):
    users: list[UserRead]
    posts: list[PostRead]


class TrendingTopicRead(BaseModel):
    genre: str
    posts_count: int

    model_config = ConfigDict(from_attributes=True)


__all__ = ["SearchResultsRead", "TrendingTopicRead"]
