from datetime import datetime, timezone
from typing import Optional

import attrs
import uuid_utils
from uuid_utils import UUID

from src.platform.exception.exceptions import DomainError


MAX_MESSAGE_LENGTH = 2000


@attrs.define
class Message:
    id: UUID
    show_request_id: int
    sender_id: int
    receiver_id: int
    content: str
    read: bool = False
    created_at: Optional[datetime] = None

    @classmethod
    def create(
        cls, *, show_request_id: int, sender_id: int, receiver_id: int, content: str
    ) -> 'Message':
        content = (content or '').strip()
        if not content:
            raise DomainError('Message content cannot be empty')
        if len(content) > MAX_MESSAGE_LENGTH:
            raise DomainError(f'Message content cannot exceed {MAX_MESSAGE_LENGTH} characters')
        return cls(
            id=uuid_utils.uuid7(),
            show_request_id=show_request_id,
            sender_id=sender_id,
            receiver_id=receiver_id,
            content=content,
            read=False,
            created_at=datetime.now(timezone.utc),
        )
