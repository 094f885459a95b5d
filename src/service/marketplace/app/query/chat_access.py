from src.platform.exception.exceptions import ForbiddenError, NotFoundError
from src.service.marketplace.app.interface.i_show_request_query_repo import (
    IShowRequestQueryRepo,
)
from src.service.marketplace.app.interface.i_venue_query_repo import IVenueQueryRepo


async def resolve_chat_counterpart(
    *,
    show_request_query_repo: IShowRequestQueryRepo,
    venue_query_repo: IVenueQueryRepo,
    request_id: int,
    participant_id: int,
) -> int:
    """
    Chat gate shared by send, retrieve and stream

    Returns the other participant's id. Raises ForbiddenError unless the
    caller is the artist or the venue owner and the request is accepted.
    """
    show_request = await show_request_query_repo.get_by_id(request_id=request_id)
    if not show_request:
        raise NotFoundError('Show request not found')

    venue = await venue_query_repo.get_by_id(venue_id=show_request.venue_id)
    if not venue:
        raise NotFoundError('Venue not found')

    counterpart_id = show_request.counterpart_of(
        participant_id=participant_id, venue_owner_id=venue.owner_id
    )
    if not show_request.is_accepted:
        raise ForbiddenError(
            f'Messaging is only available for accepted requests (status: {show_request.status.value})'
        )
    return counterpart_id
