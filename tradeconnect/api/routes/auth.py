"""Authentication routes"""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ...api.dependencies import (
    get_current_user,
    get_dispatcher,
    get_email_service,
    get_settings,
    get_unit_of_work,
    to_http_exception,
)
from ...application.dtos.auth_dtos import (
    EmailDto,
    LoginResponse,
    LoginUserDto,
    MessageResponse,
    RegisterResponse,
    RegisterUserDto,
    ResetPasswordDto,
    UserDto,
)
from ...application.event_dispatcher import EventDispatcher
from ...application.use_cases.auth_use_cases import (
    ForgotPasswordUseCase,
    LoginUserUseCase,
    RegisterUserUseCase,
    ResendVerificationUseCase,
    ResetPasswordUseCase,
    VerifyEmailUseCase,
)
from ...core.config import Settings
from ...domain.entities.user import User
from ...domain.exceptions import MarketplaceError
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...infrastructure.external_services.email_service import EmailService

router = APIRouter()


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register_user(
    user_data: RegisterUserDto,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    email_service: EmailService = Depends(get_email_service),
    dispatcher: EventDispatcher = Depends(get_dispatcher),
    config: Settings = Depends(get_settings),
):
    """Register a new buyer or supplier account"""
    use_case = RegisterUserUseCase(unit_of_work, email_service, dispatcher, config)
    try:
        return await use_case.execute(user_data)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.post("/login", response_model=LoginResponse)
async def login_user(
    login_data: LoginUserDto,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    """Login user"""
    use_case = LoginUserUseCase(unit_of_work)
    try:
        return await use_case.execute(login_data)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.get("/verify-email", response_model=MessageResponse)
async def verify_email(
    token: str = Query(..., min_length=1),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    dispatcher: EventDispatcher = Depends(get_dispatcher),
):
    use_case = VerifyEmailUseCase(unit_of_work, dispatcher)
    try:
        return await use_case.execute(token)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.post("/resend-verification", response_model=MessageResponse)
async def resend_verification(
    request: EmailDto,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    email_service: EmailService = Depends(get_email_service),
    config: Settings = Depends(get_settings),
):
    use_case = ResendVerificationUseCase(unit_of_work, email_service, config)
    try:
        result = await use_case.execute(request.email)
    except MarketplaceError as e:
        raise to_http_exception(e)

    if not result.success:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=result.message)
    return result


@router.post("/forgot-password", response_model=MessageResponse)
async def forgot_password(
    request: EmailDto,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    email_service: EmailService = Depends(get_email_service),
    config: Settings = Depends(get_settings),
):
    """Handle forgot password request"""
    use_case = ForgotPasswordUseCase(unit_of_work, email_service, config)
    return await use_case.execute(request.email)


@router.post("/reset-password", response_model=MessageResponse)
async def reset_password(
    request: ResetPasswordDto,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    """Reset password with token"""
    use_case = ResetPasswordUseCase(unit_of_work)
    try:
        return await use_case.execute(request)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.get("/user", response_model=UserDto)
async def get_user(current_user: User = Depends(get_current_user)):
    """Get the caller's account"""
    return UserDto.model_validate(current_user)
