"""FastAPI dependencies: settings and the identity gate."""

from fastapi import Depends, HTTPException, Request, status
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.api.sessions import read_session_token
from storefront.config import Settings
from storefront.user.user import User


def get_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or Settings()


def session_token(request: Request, settings: Settings) -> str | None:
    """Bearer header first, then the session cookie."""
    authorization = request.headers.get("Authorization", "")
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials:
        return credentials.strip()
    return request.cookies.get(settings.session_cookie_name)


async def optional_user(request: Request, settings: Settings = Depends(get_settings)) -> User | None:
    claims = read_session_token(session_token(request, settings), settings)
    if claims is None:
        return None
    try:
        user = current_domain.repository_for(User).get(claims.user_id)
    except ObjectNotFoundError:
        return None

    # Tokens issued before the last logout or password reset
    if claims.session_version != (user.session_version or 0):
        return None
    return user


async def current_user(user: User | None = Depends(optional_user)) -> User:
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user
