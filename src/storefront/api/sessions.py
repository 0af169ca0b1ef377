"""Session tokens: signed JWTs carrying the user id and session version.

Logging out bumps the user's session version, which voids every token
issued before it.
"""

from datetime import UTC, datetime
from typing import NamedTuple

from jose import JWTError, jwt

from storefront.config import Settings


class SessionClaims(NamedTuple):
    user_id: str
    session_version: int


def issue_session_token(
    user_id: str,
    settings: Settings,
    session_version: int = 0,
    now: datetime | None = None,
) -> str:
    now = now or datetime.now(UTC)
    claims = {
        "sub": str(user_id),
        "ver": int(session_version or 0),
        "iat": now,
        "exp": now + settings.session_ttl,
    }
    return jwt.encode(claims, settings.secret_key, algorithm=settings.jwt_algorithm)


def read_session_token(token: str | None, settings: Settings) -> SessionClaims | None:
    """Return the claims of a valid token, None for missing, forged or expired ones."""
    if not token:
        return None
    try:
        claims = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None

    if not claims.get("sub") or not isinstance(claims.get("ver"), int):
        return None
    return SessionClaims(user_id=claims["sub"], session_version=claims["ver"])
