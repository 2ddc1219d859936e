"""Persistence for moderation reports."""

from __future__ import annotations

from sqlalchemy.orm import Session

from writers_guild.domain.entities import Report
from writers_guild.infrastructure.models import ReportModel
from writers_guild.utils import utcnow


class ReportRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def exists(self, reporter_id: int, post_id: int) -> bool:
        return (
            self.session.query(ReportModel.id)
            .filter_by(reporter_id=reporter_id, post_id=post_id)
            .first()
            is not None
        )

    def create(self, report: Report) -> Report:
        model = ReportModel(
            post_id=report.post_id,
            reporter_id=report.reporter_id,
            reason=report.reason,
            details=report.details,
            created_at=report.created_at or utcnow(),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def list_recent(self, *, limit: int = 50, offset: int = 0) -> list[Report]:
        query = (
            self.session.query(ReportModel)
            .order_by(ReportModel.created_at.desc(), ReportModel.id.desc())
            .offset(offset)
            .limit(limit)
        )
        return [self._to_entity(model) for model in query.all()]

    @staticmethod
    def _to_entity(model: ReportModel) -> Report:
        return Report(
            id=model.id,
            post_id=model.post_id,
            reporter_id=model.reporter_id,
            reason=model.reason,
            details=model.details,
            created_at=model.created_at,
        )


__all__ = ["ReportRepository"]
