from datetime import datetime
import uuid

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Integer, Text, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.db_setting import Base


class MessageModel(Base):
    __tablename__ = 'message'

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True)  # UUID7
    show_request_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('show_request.id'), nullable=False
    )
    sender_id: Mapped[int] = mapped_column(Integer, ForeignKey('profile.id'), nullable=False)
    receiver_id: Mapped[int] = mapped_column(Integer, ForeignKey('profile.id'), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    read: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    __table_args__ = (
        Index('ix_message_thread', 'show_request_id', 'created_at'),
        Index('ix_message_unread', 'receiver_id', 'read'),
    )
