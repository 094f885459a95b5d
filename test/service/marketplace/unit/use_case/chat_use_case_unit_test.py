"""
Unit tests for chat messaging

SendMessageUseCase and GetChatThreadUseCase share one gate: only the two
participants of an accepted request may read or write its thread.
"""

from datetime import datetime, timezone

import pytest
import uuid_utils

from src.platform.exception.exceptions import DomainError, ForbiddenError, NotFoundError
from src.service.marketplace.app.command.send_message_use_case import SendMessageUseCase
from src.service.marketplace.app.query.get_chat_thread_use_case import GetChatThreadUseCase
from src.service.marketplace.domain.entity.message_entity import Message
from src.service.marketplace.domain.entity.show_request_entity import ShowRequestStatus
from src.service.marketplace.domain.enum.notification_type import NotificationType
from test.service.marketplace.unit.test_helpers import (
    ARTIST_ID,
    OUTSIDER_ID,
    REQUEST_ID,
    VENUE_OWNER_ID,
    RepositoryMocks,
    make_show_request,
    make_venue,
)


def _message(*, sender_id: int, receiver_id: int, content: str, read: bool = False) -> Message:
    return Message(
        id=uuid_utils.uuid7(),
        show_request_id=REQUEST_ID,
        sender_id=sender_id,
        receiver_id=receiver_id,
        content=content,
        read=read,
        created_at=datetime.now(timezone.utc),
    )


@pytest.fixture(autouse=True)
def accepted_request(mocks: RepositoryMocks) -> None:
    mocks.show_request_query_repo.get_by_id.return_value = make_show_request(
        status=ShowRequestStatus.ACCEPTED
    )
    mocks.venue_query_repo.get_by_id.return_value = make_venue()


@pytest.fixture
def send_use_case(mocks: RepositoryMocks) -> SendMessageUseCase:
    async def _create(*, message: Message) -> Message:
        return message

    mocks.message_command_repo.create.side_effect = _create
    return SendMessageUseCase(
        show_request_query_repo=mocks.show_request_query_repo,
        venue_query_repo=mocks.venue_query_repo,
        message_command_repo=mocks.message_command_repo,
        notification_broadcaster=mocks.notification_broadcaster,
    )


@pytest.fixture
def thread_use_case(mocks: RepositoryMocks) -> GetChatThreadUseCase:
    return GetChatThreadUseCase(
        show_request_query_repo=mocks.show_request_query_repo,
        venue_query_repo=mocks.venue_query_repo,
        message_query_repo=mocks.message_query_repo,
        message_command_repo=mocks.message_command_repo,
    )


@pytest.mark.unit
class TestSendMessage:
    async def test_artist_messages_venue_owner(
        self, send_use_case: SendMessageUseCase, mocks: RepositoryMocks
    ) -> None:
        """
        Given: an accepted request
        When: the artist sends a message
        Then: the venue owner is the receiver, the thread and their feed get it
        """
        message = await send_use_case.send(
            request_id=REQUEST_ID, sender_id=ARTIST_ID, content='  Soundcheck at 6?  '
        )

        assert message.receiver_id == VENUE_OWNER_ID
        assert message.content == 'Soundcheck at 6?'
        assert message.read is False
        mocks.notification_broadcaster.publish_chat_message.assert_awaited_once()
        assert mocks.notified_users() == [(VENUE_OWNER_ID, NotificationType.MESSAGE_SENT)]

    async def test_venue_owner_messages_artist(self, send_use_case: SendMessageUseCase) -> None:
        message = await send_use_case.send(
            request_id=REQUEST_ID, sender_id=VENUE_OWNER_ID, content='Sure'
        )

        assert message.receiver_id == ARTIST_ID

    @pytest.mark.parametrize('status', [ShowRequestStatus.PENDING, ShowRequestStatus.REJECTED])
    async def test_chat_closed_unless_accepted(
        self, send_use_case: SendMessageUseCase, mocks: RepositoryMocks, status: ShowRequestStatus
    ) -> None:
        mocks.show_request_query_repo.get_by_id.return_value = make_show_request(status=status)

        with pytest.raises(ForbiddenError, match='accepted'):
            await send_use_case.send(request_id=REQUEST_ID, sender_id=ARTIST_ID, content='Hi')
        mocks.message_command_repo.create.assert_not_awaited()

    async def test_outsider_cannot_send(
        self, send_use_case: SendMessageUseCase, mocks: RepositoryMocks
    ) -> None:
        with pytest.raises(ForbiddenError, match='participants'):
            await send_use_case.send(request_id=REQUEST_ID, sender_id=OUTSIDER_ID, content='Hi')
        mocks.notification_broadcaster.publish_chat_message.assert_not_awaited()

    async def test_blank_message_rejected(self, send_use_case: SendMessageUseCase) -> None:
        with pytest.raises(DomainError, match='empty'):
            await send_use_case.send(request_id=REQUEST_ID, sender_id=ARTIST_ID, content=' \n ')

    async def test_unknown_request(
        self, send_use_case: SendMessageUseCase, mocks: RepositoryMocks
    ) -> None:
        mocks.show_request_query_repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await send_use_case.send(request_id=404, sender_id=ARTIST_ID, content='Hi')


@pytest.mark.unit
class TestChatThread:
    async def test_retrieve_returns_thread_then_marks_read(
        self, thread_use_case: GetChatThreadUseCase, mocks: RepositoryMocks
    ) -> None:
        """
        Given: one unread message addressed to the venue owner
        When: the venue owner retrieves the thread
        Then: the message comes back as unread and is marked read afterwards
        """
        thread = [
            _message(sender_id=ARTIST_ID, receiver_id=VENUE_OWNER_ID, content='Hello'),
            _message(sender_id=VENUE_OWNER_ID, receiver_id=ARTIST_ID, content='Hi', read=True),
        ]
        mocks.message_query_repo.list_by_request.return_value = thread
        mocks.message_command_repo.mark_read.return_value = 1

        messages = await thread_use_case.retrieve(request_id=REQUEST_ID, viewer_id=VENUE_OWNER_ID)

        assert [m.content for m in messages] == ['Hello', 'Hi']
        assert messages[0].read is False
        mocks.message_command_repo.mark_read.assert_awaited_once_with(
            show_request_id=REQUEST_ID, receiver_id=VENUE_OWNER_ID
        )

    async def test_outsider_cannot_read(
        self, thread_use_case: GetChatThreadUseCase, mocks: RepositoryMocks
    ) -> None:
        with pytest.raises(ForbiddenError):
            await thread_use_case.retrieve(request_id=REQUEST_ID, viewer_id=OUTSIDER_ID)
        mocks.message_query_repo.list_by_request.assert_not_awaited()
        mocks.message_command_repo.mark_read.assert_not_awaited()

    async def test_ensure_access_returns_counterpart(
        self, thread_use_case: GetChatThreadUseCase
    ) -> None:
        assert (
            await thread_use_case.ensure_access(request_id=REQUEST_ID, viewer_id=ARTIST_ID)
            == VENUE_OWNER_ID
        )

    async def test_unread_count(
        self, thread_use_case: GetChatThreadUseCase, mocks: RepositoryMocks
    ) -> None:
        mocks.message_query_repo.count_unread.return_value = 4

        assert await thread_use_case.unread_count(viewer_id=ARTIST_ID) == 4
