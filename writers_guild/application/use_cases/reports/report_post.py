"""Use cases for moderation reports."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from writers_guild.application.use_cases.notifications import NotificationSink, notify_many
from writers_guild.domain.entities import NOTIFICATION_REPORT, Report, User
from writers_guild.domain.errors import (
    DuplicateActionError,
    NotFoundError,
    PermissionDeniedError,
    SelfActionError,
    ValidationFailedError,
)
from writers_guild.infrastructure.repositories import PostRepository, ReportRepository, UserRepository
from writers_guild.utils import utcnow

REPORT_REASONS = (
    "spam",
    "harassment",
    "hate-speech",
    "inappropriate",
    "copyright",
    "misinformation",
    "violence",
    "other",
)


def report_post(
    session: Session,
    publisher: NotificationSink,
    *,
    reporter: User,
    post_id: int,
    reason: str,
    details: str | None = None,
) -> Report:
    """File a report against someone else's post and alert the admins."""

    if reason not in REPORT_REASONS:
        raise ValidationFailedError(f"Unsupported report reason: {reason}")
    post = PostRepository(session).get(post_id)
    if post is None:
        raise NotFoundError("Post not found")
    if post.author_id == reporter.id:
        raise SelfActionError("Cannot report your own post")

    reports = ReportRepository(session)
    if reports.exists(reporter.id, post_id):
        raise DuplicateActionError("Post already reported")
    try:
        report = reports.create(
            Report(
                id=None,
                post_id=post_id,
                reporter_id=reporter.id,
                reason=reason,
                details=(details or "").strip() or None,
                created_at=utcnow(),
            )
        )
    except IntegrityError as exc:
        session.rollback()
        raise DuplicateActionError("Post already reported") from exc

    admin_ids = [admin_id for admin_id in UserRepository(session).list_admin_ids() if admin_id != reporter.id]
    notify_many(
        session,
        publisher,
        recipient_ids=admin_ids,
        actor_id=reporter.id,
        kind=NOTIFICATION_REPORT,
        post_id=post_id,
        data={"report_id": report.id, "reason": reason, "post_title": post.title},
    )
    return report


def list_reports(session: Session, *, acting_user: User, limit: int = 50, offset: int = 0) -> list[Report]:
    if not acting_user.has_admin_rights():
        raise PermissionDeniedError("Only admins can review reports")
    return ReportRepository(session).list_recent(limit=limit, offset=offset)


__all__ = ["REPORT_REASONS", "list_reports", "report_post"]
