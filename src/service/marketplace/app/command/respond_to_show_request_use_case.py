from typing import Self

import attrs
from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import ConflictError, ForbiddenError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.marketplace_metrics import metrics
from src.service.marketplace.app.interface.i_notification_broadcaster import (
    INotificationBroadcaster,
)
from src.service.marketplace.app.interface.i_show_request_command_repo import (
    IShowRequestCommandRepo,
)
from src.service.marketplace.app.interface.i_show_request_query_repo import (
    IShowRequestQueryRepo,
)
from src.service.marketplace.app.interface.i_venue_query_repo import IVenueQueryRepo
from src.service.marketplace.domain.entity.show_request_entity import (
    ShowRequest,
    ShowRequestStatus,
)
from src.service.marketplace.domain.enum.notification_type import NotificationType
from src.service.marketplace.domain.value_object.session import Session


class RespondToShowRequestUseCase:
    """
    pending -> accepted | rejected, decided by the counterpart of the initiator

    The status write is a conditional update on `status = 'pending'`; when it
    changes no row the request was decided concurrently and the caller gets
    a Conflict with the stored status untouched.
    """

    def __init__(
        self,
        *,
        show_request_query_repo: IShowRequestQueryRepo,
        show_request_command_repo: IShowRequestCommandRepo,
        venue_query_repo: IVenueQueryRepo,
        notification_broadcaster: INotificationBroadcaster,
    ) -> None:
        self.show_request_query_repo = show_request_query_repo
        self.show_request_command_repo = show_request_command_repo
        self.venue_query_repo = venue_query_repo
        self.notification_broadcaster = notification_broadcaster
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        show_request_query_repo: IShowRequestQueryRepo = Depends(
            Provide[Container.show_request_query_repo]
        ),
        show_request_command_repo: IShowRequestCommandRepo = Depends(
            Provide[Container.show_request_command_repo]
        ),
        venue_query_repo: IVenueQueryRepo = Depends(Provide[Container.venue_query_repo]),
        notification_broadcaster: INotificationBroadcaster = Depends(
            Provide[Container.notification_broadcaster]
        ),
    ) -> Self:
        return cls(
            show_request_query_repo=show_request_query_repo,
            show_request_command_repo=show_request_command_repo,
            venue_query_repo=venue_query_repo,
            notification_broadcaster=notification_broadcaster,
        )

    @Logger.io
    async def respond(
        self, *, request_id: int, session: Session, new_status: ShowRequestStatus
    ) -> ShowRequest:
        with self.tracer.start_as_current_span(
            'use_case.respond_to_show_request',
            attributes={
                'show_request.id': request_id,
                'responder.id': session.principal_id,
                'show_request.new_status': str(new_status),
            },
        ):
            show_request = await self.show_request_query_repo.get_by_id(request_id=request_id)
            if not show_request:
                raise NotFoundError('Show request not found')

            venue = await self.venue_query_repo.get_by_id(venue_id=show_request.venue_id)
            if not venue:
                raise NotFoundError('Venue not found')

            show_request.ensure_can_respond(
                responder_id=session.principal_id, venue_owner_id=venue.owner_id
            )
            if session.principal_id == venue.owner_id and not session.is_verified_venue_owner:
                raise ForbiddenError('Venue owner verification is required')

            # Validates the decision and rejects already-decided requests
            show_request.respond(new_status=new_status)

            updated = await self.show_request_command_repo.update_status_if_pending(
                request_id=request_id, new_status=new_status
            )
            if not updated:
                raise ConflictError('Request is no longer pending')

            metrics.show_request_transitions.labels(status=updated.status.value).inc()
            Logger.base.info(
                f'🤝 [REQUEST] Request {request_id} {updated.status.value} '
                f'by profile {session.principal_id}'
            )

            payload = attrs.asdict(updated)
            for participant_id in updated.participant_ids(venue_owner_id=venue.owner_id):
                await self.notification_broadcaster.notify_user(
                    user_id=participant_id,
                    event_type=NotificationType.REQUEST_STATUS_CHANGED,
                    payload=payload,
                )
            return updated
