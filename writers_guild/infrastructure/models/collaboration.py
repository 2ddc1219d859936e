"""SQLAlchemy models for collaboration invites and post reports."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint

from writers_guild.infrastructure.database import Base
from writers_guild.utils import utcnow


class CollaborationInviteModel(Base):
    """Invitation for a user to co-write a post."""

    __tablename__ = "collaboration_invite"

    id = Column(Integer, primary_key=True, index=True)
    post_id = Column(Integer, ForeignKey("post.id", ondelete="CASCADE"), nullable=False, index=True)
    inviter_id = Column(Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False)
    invitee_id = Column(Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True)
    status = Column(String(20), nullable=False, default="pending")
    created_at = Column(DateTime, nullable=False, default=utcnow)
    responded_at = Column(DateTime, nullable=True)


class ReportModel(Base):
    """Moderation report filed by a user against a post."""

    __tablename__ = "report"
    __table_args__ = (UniqueConstraint("reporter_id", "post_id", name="uq_report_reporter_post"),)

    id = Column(Integer, primary_key=True, index=True)
    post_id = Column(Integer, ForeignKey("post.id", ondelete="CASCADE"), nullable=False, index=True)
    reporter_id = Column(Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False)
    reason = Column(String(50), nullable=False)
    details = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)


__all__ = ["CollaborationInviteModel", "ReportModel"]
