"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from writers_guild.infrastructure.database import Base
from writers_guild.utils import utcnow


class NotificationModel(Base):
    """Database representation for user notifications."""

    __tablename__ = "notification"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True)
    type = Column(String(50), nullable=False)
    actor_id = Column(Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=True)
    post_id = Column(Integer, ForeignKey("post.id", ondelete="CASCADE"), nullable=True)
    is_read = Column(Boolean, nullable=False, default=False)
    data = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime, nullable=False, default=utcnow, index=True)

    actor = relationship("UserModel", foreign_keys=[actor_id], lazy="joined")


__all__ = ["NotificationModel"]
