"""Runtime settings for the storefront web process.

Settings are read from the environment once, at application startup, and
passed explicitly to whatever needs them. Protean providers are configured
separately in ``domain.toml``.
"""

import os
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path

from protean.exceptions import ConfigurationError

from storefront.utils.logging import get_environment

ACCEPTED_IMAGE_TYPES = frozenset({"image/png", "image/jpg", "image/jpeg"})

# Environments that must never sign sessions with the built-in development key
SECRET_REQUIRED_ENVIRONMENTS = ("production", "staging")


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    secret_key: str = "change-me"
    jwt_algorithm: str = "HS256"
    session_cookie_name: str = "session"
    session_ttl: timedelta = timedelta(hours=12)
    secure_cookies: bool = False
    items_per_page: int = 2
    image_dir: Path = Path("images")
    image_url_prefix: str = "/images"
    accepted_image_types: frozenset[str] = field(default=ACCEPTED_IMAGE_TYPES)
    base_url: str = "http://localhost:8000"
    mail_sender: str = "shop@storefront.local"
    sendgrid_api_key: str | None = None

    @classmethod
    def from_env(cls) -> "Settings":
        """Read settings from the environment.

        Raises ConfigurationError in production and staging when
        ``STOREFRONT_SECRET_KEY`` is unset.
        """
        secret_key = os.getenv("STOREFRONT_SECRET_KEY")
        if not secret_key:
            environment = get_environment()
            if environment in SECRET_REQUIRED_ENVIRONMENTS:
                raise ConfigurationError(f"STOREFRONT_SECRET_KEY must be set in {environment}")
            secret_key = cls.secret_key

        return cls(
            secret_key=secret_key,
            session_ttl=timedelta(minutes=int(os.getenv("STOREFRONT_SESSION_TTL_MINUTES", "720"))),
            secure_cookies=_env_bool("STOREFRONT_SECURE_COOKIES", False),
            items_per_page=int(os.getenv("STOREFRONT_ITEMS_PER_PAGE", str(cls.items_per_page))),
            image_dir=Path(os.getenv("STOREFRONT_IMAGE_DIR", "images")),
            base_url=os.getenv("STOREFRONT_BASE_URL", cls.base_url).rstrip("/"),
            mail_sender=os.getenv("STOREFRONT_MAIL_SENDER", cls.mail_sender),
            sendgrid_api_key=os.getenv("SENDGRID_API_KEY") or None,
        )
