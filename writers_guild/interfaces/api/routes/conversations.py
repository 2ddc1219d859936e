"""Routes for direct messaging."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from writers_guild.application.use_cases.messaging import (
    list_conversations,
    list_messages,
    mark_conversation_read,
    send_message,
    start_conversation,
)
from writers_guild.domain.entities import User
from writers_guild.domain.errors import WritersGuildError
from writers_guild.infrastructure.database import get_db
from writers_guild.infrastructure.realtime import EventPublisher
from writers_guild.interfaces.api.dependencies import get_current_user
from writers_guild.interfaces.api.routes_helpers import http_error
from writers_guild.interfaces.api.schemas import (
    ConversationCreate,
    ConversationOverviewRead,
    ConversationRead,
    MarkedReadResponse,
    MessageCreate,
    MessageRead,
)


def build_router(publisher: EventPublisher) -> APIRouter:
    """Return the conversations router; new messages are pushed through ``publisher``."""

    router = APIRouter(prefix="/api/conversations", tags=["conversations"])

    @router.get("", response_model=list[ConversationOverviewRead])
    def read_conversations(
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
    ):
        return [
            ConversationOverviewRead.model_validate(overview)
            for overview in list_conversations(db, user=current_user)
        ]

    @router.post("", response_model=ConversationRead)
    def open_conversation(
        payload: ConversationCreate,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
    ):
        """Return the conversation with ``participant_id``, creating it if needed."""

        try:
            conversation = start_conversation(
                db, user=current_user, participant_id=payload.participant_id
            )
        except WritersGuildError as exc:
            raise http_error(exc) from exc
        return ConversationRead.model_validate(conversation)

    @router.get("/{conversation_id}/messages", response_model=list[MessageRead])
    def read_messages(
        conversation_id: int,
        limit: int = Query(50, ge=1, le=200),
        offset: int = Query(0, ge=0),
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
    ):
        try:
            messages = list_messages(
                db,
                user=current_user,
                conversation_id=conversation_id,
                limit=limit,
                offset=offset,
            )
        except WritersGuildError as exc:
            raise http_error(exc) from exc
        return [MessageRead.model_validate(message) for message in messages]

    @router.post(
        "/{conversation_id}/messages",
        response_model=MessageRead,
        status_code=status.HTTP_201_CREATED,
    )
    def post_message(
        conversation_id: int,
        payload: MessageCreate,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
    ):
        try:
            message = send_message(
                db,
                publisher,
                sender=current_user,
                conversation_id=conversation_id,
                content=payload.content,
                message_type=payload.message_type,
                attachment_urls=payload.attachment_urls,
            )
        except WritersGuildError as exc:
            raise http_error(exc) from exc
        return MessageRead.model_validate(message)

    @router.put("/{conversation_id}/read", response_model=MarkedReadResponse)
    def read_conversation(
        conversation_id: int,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
    ):
        try:
            updated = mark_conversation_read(db, user=current_user, conversation_id=conversation_id)
        except WritersGuildError as exc:
            raise http_error(exc) from exc
        return MarkedReadResponse(updated=updated)

    return router


__all__ = ["build_router"]
