import secrets
from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Cookie, Depends, Header
from opentelemetry import trace

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import AuthenticationError, ForbiddenError
from src.service.marketplace.app.query.resolve_session_use_case import ResolveSessionUseCase
from src.service.marketplace.domain.value_object.session import Session
from src.service.marketplace.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class RoleAuthStrategy:
    @staticmethod
    def can_book_tickets(session: Session) -> bool:
        return session.is_audience and session.profile_loaded

    @staticmethod
    def can_manage_venue(session: Session) -> bool:
        return session.is_verified_venue_owner

    @staticmethod
    def is_artist(session: Session) -> bool:
        return session.is_artist

    @staticmethod
    def is_venue_owner(session: Session) -> bool:
        return session.is_venue_owner


@inject
async def get_current_session(
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
    resolve_session_use_case: ResolveSessionUseCase = Depends(ResolveSessionUseCase.depends),
    token: Optional[str] = Cookie(None, alias=settings.SESSION_COOKIE_NAME),
) -> Session:
    principal_id, email = jwt_auth.get_principal_from_jwt(token)
    return await resolve_session_use_case.resolve(principal_id=principal_id, email=email)


async def require_audience(session: Session = Depends(get_current_session)) -> Session:
    tracer = trace.get_tracer(__name__)
    with tracer.start_as_current_span(
        'auth.require_audience',
        attributes={'user.id': session.principal_id, 'user.role': session.role.value},
    ):
        if not RoleAuthStrategy.can_book_tickets(session):
            raise ForbiddenError('Only audience members can book tickets')
        return session


async def require_artist(session: Session = Depends(get_current_session)) -> Session:
    if not RoleAuthStrategy.is_artist(session):
        raise ForbiddenError('Only artists can perform this action')
    return session


async def require_venue_owner(session: Session = Depends(get_current_session)) -> Session:
    if not RoleAuthStrategy.is_venue_owner(session):
        raise ForbiddenError('Only venue owners can perform this action')
    return session


async def require_verified_venue_owner(
    session: Session = Depends(require_venue_owner),
) -> Session:
    if not RoleAuthStrategy.can_manage_venue(session):
        raise ForbiddenError(
            f'Venue owner verification is required (status: {session.verification_status.value})'
        )
    return session


async def require_artist_or_venue_owner(
    session: Session = Depends(get_current_session),
) -> Session:
    if not (session.is_artist or session.is_venue_owner):
        raise ForbiddenError("You don't have permission to perform this action")
    return session


async def require_admin(x_admin_token: Optional[str] = Header(None)) -> None:
    if not x_admin_token:
        raise AuthenticationError('Not authenticated')
    if not secrets.compare_digest(x_admin_token, settings.ADMIN_TOKEN.get_secret_value()):
        raise ForbiddenError('Invalid admin token')
