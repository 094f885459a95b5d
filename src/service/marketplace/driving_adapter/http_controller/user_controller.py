from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Response, status

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.command.sign_up_use_case import SignUpUseCase
from src.service.marketplace.app.command.update_profile_use_case import UpdateProfileUseCase
from src.service.marketplace.app.interface.i_profile_query_repo import IProfileQueryRepo
from src.service.marketplace.app.query.get_chat_thread_use_case import GetChatThreadUseCase
from src.service.marketplace.domain.value_object.session import Session
from src.service.marketplace.driving_adapter.http_controller.auth.jwt_auth import JwtAuth
from src.service.marketplace.driving_adapter.http_controller.auth.role_auth import (
    get_current_session,
)
from src.service.marketplace.driving_adapter.http_controller.schema.user_schema import (
    LoginRequest,
    ProfileResponse,
    ProfileUpdateRequest,
    SessionResponse,
    SignUpRequest,
)


router = APIRouter()


@router.post('', response_model=ProfileResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def sign_up(
    request: SignUpRequest,
    use_case: SignUpUseCase = Depends(SignUpUseCase.depends),
) -> ProfileResponse:
    profile = await use_case.sign_up(
        email=request.email,
        password=request.password.get_secret_value(),
        full_name=request.full_name,
        role=request.role,
        avatar_url=request.avatar_url,
    )
    return ProfileResponse.model_validate(profile)


@router.post('/login', response_model=ProfileResponse)
@Logger.io
@inject
async def login(
    response: Response,
    request: LoginRequest,
    profile_query_repo: IProfileQueryRepo = Depends(Provide[Container.profile_query_repo]),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> ProfileResponse:
    profile = await jwt_auth.authenticate(
        profile_query_repo=profile_query_repo,
        email=request.email.strip().lower(),
        password=request.password.get_secret_value(),
    )

    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=jwt_auth.create_jwt_token(profile),
        max_age=jwt_auth.max_age_seconds,
        httponly=True,
        samesite='lax',
        secure=settings.SESSION_COOKIE_SECURE,
    )
    Logger.base.info(f'🔑 [LOGIN] Profile {profile.id} signed in')
    return ProfileResponse.model_validate(profile)


@router.post('/logout', status_code=status.HTTP_204_NO_CONTENT)
async def logout(response: Response) -> Response:
    response.delete_cookie(key=settings.SESSION_COOKIE_NAME, httponly=True, samesite='lax')
    response.status_code = status.HTTP_204_NO_CONTENT
    return response


@router.get('', response_model=SessionResponse)
@Logger.io
async def get_me(
    session: Session = Depends(get_current_session),
    chat_use_case: GetChatThreadUseCase = Depends(GetChatThreadUseCase.depends),
) -> SessionResponse:
    return SessionResponse(
        principal_id=session.principal_id,
        email=session.email,
        full_name=session.full_name,
        role=session.role,
        verification_status=session.verification_status,
        profile_loaded=session.profile_loaded,
        unread_messages=await chat_use_case.unread_count(viewer_id=session.principal_id),
    )


@router.patch('', response_model=ProfileResponse)
@Logger.io
async def update_me(
    request: ProfileUpdateRequest,
    session: Session = Depends(get_current_session),
    use_case: UpdateProfileUseCase = Depends(UpdateProfileUseCase.depends),
) -> ProfileResponse:
    profile = await use_case.update(
        profile_id=session.principal_id, **request.model_dump(exclude_unset=True)
    )
    return ProfileResponse.model_validate(profile)
