"""Mail adapter registry.

Uses the in-memory fake by default. ``configure_mail`` installs the
SendGrid adapter when an API key is configured, and remembers the sender
address and the base URL used in links.
"""

from storefront.config import Settings

_mailer = None
_settings = Settings()


def get_mailer():
    """Return the configured email adapter (singleton)."""
    global _mailer
    if _mailer is None:
        from storefront.notification.fake_email import FakeEmailAdapter

        _mailer = FakeEmailAdapter()
    return _mailer


def set_mailer(adapter):
    global _mailer
    _mailer = adapter


def reset_mailer():
    """Drop the configured adapter and settings (useful for testing)."""
    global _mailer, _settings
    _mailer = None
    _settings = Settings()


def get_mail_settings() -> Settings:
    return _settings


def configure_mail(settings: Settings):
    global _settings
    _settings = settings

    if settings.sendgrid_api_key:
        from storefront.notification.sendgrid_email import SendGridEmailAdapter

        set_mailer(SendGridEmailAdapter(api_key=settings.sendgrid_api_key, sender=settings.mail_sender))
