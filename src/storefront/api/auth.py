"""FastAPI routes for accounts: signup, login, logout and password reset.

Routes that hash or verify a password are plain functions so bcrypt runs in
the threadpool instead of on the event loop.
"""

from fastapi import APIRouter, Depends, Response
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from storefront.api.dependencies import current_user, get_settings
from storefront.api.presenters import invalid_input
from storefront.api.schemas import (
    LoginRequest,
    MessageResponse,
    NewPasswordRequest,
    ResetRequest,
    ResetTokenResponse,
    SessionResponse,
    SignupRequest,
    StatusResponse,
    UserIdResponse,
)
from storefront.api.sessions import issue_session_token
from storefront.config import Settings
from storefront.user.authentication import EndSessions, authenticate
from storefront.user.credentials import check_password_rules, hash_password
from storefront.user.password_reset import RequestPasswordReset, ResetPassword, user_for_reset_token
from storefront.user.registration import RegisterUser

auth_router = APIRouter(tags=["auth"])


@auth_router.post("/signup", status_code=201, response_model=UserIdResponse)
def signup(body: SignupRequest):
    old_input = {"email": body.email}
    try:
        check_password_rules(body.password, body.confirm_password)
        command = RegisterUser(
            email=body.email,
            password_hash=hash_password(body.password),
        )
        user_id = current_domain.process(command, asynchronous=False)
    except ValidationError as exc:
        return invalid_input(exc, old_input)
    return UserIdResponse(user_id=user_id)


@auth_router.post("/login", response_model=SessionResponse)
def login(body: LoginRequest, response: Response, settings: Settings = Depends(get_settings)):
    try:
        user = authenticate(body.email, body.password)
    except ValidationError as exc:
        return invalid_input(exc, {"email": body.email})

    token = issue_session_token(str(user.id), settings, session_version=user.session_version)
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=int(settings.session_ttl.total_seconds()),
        httponly=True,
        secure=settings.secure_cookies,
        samesite="lax",
    )
    return SessionResponse(user_id=str(user.id), token=token)


@auth_router.post("/logout", response_model=StatusResponse)
async def logout(response: Response, user=Depends(current_user), settings: Settings = Depends(get_settings)):
    current_domain.process(EndSessions(user_id=str(user.id)), asynchronous=False)
    response.delete_cookie(key=settings.session_cookie_name)
    return StatusResponse()


@auth_router.post("/reset", response_model=MessageResponse)
async def request_reset(body: ResetRequest):
    try:
        current_domain.process(RequestPasswordReset(email=body.email), asynchronous=False)
    except ValidationError as exc:
        return invalid_input(exc, {"email": body.email})
    return MessageResponse(message="Check your inbox for a link to reset your password.")


@auth_router.get("/reset/{token}", response_model=ResetTokenResponse)
async def check_reset_token(token: str) -> ResetTokenResponse:
    user = user_for_reset_token(token)
    return ResetTokenResponse(user_id=str(user.id), password_token=token)


@auth_router.post("/new-password", response_model=StatusResponse)
def new_password(body: NewPasswordRequest):
    try:
        check_password_rules(body.password)
        command = ResetPassword(
            user_id=body.user_id,
            token=body.password_token,
            password_hash=hash_password(body.password),
        )
    except ValidationError as exc:
        return invalid_input(exc)

    current_domain.process(command, asynchronous=False)
    return StatusResponse()
