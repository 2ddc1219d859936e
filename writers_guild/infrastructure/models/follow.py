"""SQLAlchemy model for follow relationships."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, UniqueConstraint

from writers_guild.infrastructure.database import Base
from writers_guild.utils import utcnow


class FollowModel(Base):
    """A directed follower -> following edge."""

    __tablename__ = "follow"
    __table_args__ = (
        UniqueConstraint("follower_id", "following_id", name="uq_follow_pair"),
    )

    id = Column(Integer, primary_key=True, index=True)
    follower_id = Column(Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True)
    following_id = Column(Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)


__all__ = ["FollowModel"]
