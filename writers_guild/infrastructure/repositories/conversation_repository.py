"""Persistence helpers for conversations and direct messages."""

from __future__ import annotations

from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from writers_guild.domain.entities import Conversation, ConversationOverview, Message
from writers_guild.infrastructure.models import ConversationModel, MessageModel, UserModel
from writers_guild.utils import utcnow

from .user_repository import UserRepository


class ConversationRepository:
    """Store two-party conversations and the messages exchanged in them."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, conversation_id: int) -> Conversation | None:
        model = self.session.get(ConversationModel, conversation_id)
        return self._to_entity(model) if model else None

    def get_or_create(self, user_id: int, other_user_id: int) -> Conversation:
        """Return the conversation for the pair, creating it on first contact.

        Participants are stored in ascending id order so that one row exists
        per pair regardless of who wrote first. When both writers open the
        conversation at once, the losing insert reloads the winner's row.
        """

        first, second = sorted((user_id, other_user_id))
        model = self._find_pair(first, second)
        if model is None:
            now = utcnow()
            model = ConversationModel(
                participant_one_id=first,
                participant_two_id=second,
                created_at=now,
                updated_at=now,
            )
            self.session.add(model)
            try:
                self.session.commit()
            except IntegrityError:
                self.session.rollback()
                model = self._find_pair(first, second)
                if model is None:
                    raise
            else:
                self.session.refresh(model)
        return self._to_entity(model)

    def _find_pair(self, first: int, second: int) -> ConversationModel | None:
        return (
            self.session.query(ConversationModel)
            .filter_by(participant_one_id=first, participant_two_id=second)
            .first()
        )

    def list_for_user(self, user_id: int) -> list[ConversationOverview]:
        query = (
            self.session.query(ConversationModel)
            .filter(
                or_(
                    ConversationModel.participant_one_id == user_id,
                    ConversationModel.participant_two_id == user_id,
                )
            )
            .order_by(ConversationModel.updated_at.desc(), ConversationModel.id.desc())
        )
        overviews = []
        for model in query.all():
            conversation = self._to_entity(model)
            other = self.session.get(UserModel, conversation.other_participant_id(user_id))
            last_message = None
            if model.last_message_id is not None:
                message_model = self.session.get(MessageModel, model.last_message_id)
                last_message = self._message_to_entity(message_model) if message_model else None
            overviews.append(
                ConversationOverview(
                    conversation=conversation,
                    other_participant=UserRepository.to_summary(other),
                    last_message=last_message,
                    unread_count=self.count_unread(model.id, user_id),
                )
            )
        return overviews

    def add_message(self, message: Message) -> Message:
        now = message.created_at or utcnow()
        model = MessageModel(
            conversation_id=message.conversation_id,
            sender_id=message.sender_id,
            content=message.content,
            message_type=message.message_type,
            attachment_urls=list(message.attachment_urls or []),
            created_at=now,
        )
        self.session.add(model)
        self.session.flush()
        self.session.query(ConversationModel).filter(
            ConversationModel.id == message.conversation_id
        ).update(
            {
                ConversationModel.last_message_id: model.id,
                ConversationModel.last_message_at: now,
                ConversationModel.updated_at: now,
            },
            synchronize_session=False,
        )
        self.session.commit()
        self.session.refresh(model)
        return self._message_to_entity(model)

    def list_messages(self, conversation_id: int, *, limit: int = 50, offset: int = 0) -> list[Message]:
        query = (
            self.session.query(MessageModel)
            .filter(MessageModel.conversation_id == conversation_id)
            .order_by(MessageModel.created_at.desc(), MessageModel.id.desc())
            .offset(offset)
            .limit(limit)
        )
        messages = [self._message_to_entity(model) for model in query.all()]
        messages.reverse()
        return messages

    def count_unread(self, conversation_id: int, reader_id: int) -> int:
        total = (
            self.session.query(func.count(MessageModel.id))
            .filter(MessageModel.conversation_id == conversation_id)
            .filter(MessageModel.sender_id != reader_id)
            .filter(MessageModel.is_read.is_(False))
            .scalar()
        )
        return int(total or 0)

    def mark_read(self, conversation_id: int, reader_id: int) -> int:
        """Mark every message the other participant sent as read."""

        updated = (
            self.session.query(MessageModel)
            .filter(MessageModel.conversation_id == conversation_id)
            .filter(MessageModel.sender_id != reader_id)
            .filter(MessageModel.is_read.is_(False))
            .update(
                {MessageModel.is_read: True, MessageModel.read_at: utcnow()},
                synchronize_session=False,
            )
        )
        self.session.commit()
        return updated

    @staticmethod
    def _to_entity(model: ConversationModel) -> Conversation:
        return Conversation(
            id=model.id,
            participant_one_id=model.participant_one_id,
            participant_two_id=model.participant_two_id,
            last_message_id=model.last_message_id,
            last_message_at=model.last_message_at,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @staticmethod
    def _message_to_entity(model: MessageModel) -> Message:
        return Message(
            id=model.id,
            conversation_id=model.conversation_id,
            sender_id=model.sender_id,
            content=model.content,
            message_type=model.message_type,
            attachment_urls=list(model.attachment_urls or []),
            is_read=bool(model.is_read),
            read_at=model.read_at,
            created_at=model.created_at,
            sender=UserRepository.to_summary(model.sender),
        )


__all__ = ["ConversationRepository"]
