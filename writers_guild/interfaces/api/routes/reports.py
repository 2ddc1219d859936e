"""Routes for reporting posts and reviewing reports."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from writers_guild.application.use_cases.reports import list_reports, report_post
from writers_guild.domain.entities import User
from writers_guild.domain.errors import WritersGuildError
from writers_guild.infrastructure.database import get_db
from writers_guild.infrastructure.realtime import EventPublisher
from writers_guild.interfaces.api.dependencies import get_current_user, require_admin
from writers_guild.interfaces.api.routes_helpers import http_error
from writers_guild.interfaces.api.schemas import ReportCreate, ReportRead


def build_router(publisher: EventPublisher) -> APIRouter:
    router = APIRouter(prefix="/api", tags=["reports"])

    @router.post(
        "/posts/{post_id}/report",
        response_model=ReportRead,
        status_code=status.HTTP_201_CREATED,
    )
    def report(
        post_id: int,
        payload: ReportCreate,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
    ):
        try:
            created = report_post(
                db,
                publisher,
                reporter=current_user,
                post_id=post_id,
                reason=payload.reason,
                details=payload.details,
            )
        except WritersGuildError as exc:
            raise http_error(exc) from exc
        return ReportRead.model_validate(created)

    @router.get("/admin/reports", response_model=list[ReportRead])
    def read_reports(
        limit: int = Query(50, ge=1, le=200),
        offset: int = Query(0, ge=0),
        db: Session = Depends(get_db),
        admin: User = Depends(require_admin),
    ):
        try:
            reports = list_reports(db, acting_user=admin, limit=limit, offset=offset)
        except WritersGuildError as exc:
            raise http_error(exc) from exc
        return [ReportRead.model_validate(item) for item in reports]

    return router


__all__ = ["build_router"]
