"""SQLAlchemy model for server-side login sessions."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String

from writers_guild.infrastructure.database import Base
from writers_guild.utils import utcnow


class SessionModel(Base):
    """Session store backing the signed session cookie."""

    __tablename__ = "session"

    id = Column(String(64), primary_key=True)
    user_id = Column(
        Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    created_at = Column(DateTime, nullable=False, default=utcnow)
    expires_at = Column(DateTime, nullable=False, index=True)


__all__ = ["SessionModel"]
