"""Protean Engine runner for the storefront.

With PROTEAN_ENV=production events are processed asynchronously, so
welcome and password-reset emails are sent from this worker instead of
the web process.

Usage:
    PROTEAN_ENV=production python src/server.py
    PROTEAN_ENV=production python src/server.py --test-mode
"""

import argparse

from protean.server.engine import Engine


def main():
    parser = argparse.ArgumentParser(description="Storefront Engine runner")
    parser.add_argument(
        "--test-mode",
        action="store_true",
        help="Process pending messages once and exit",
    )
    args = parser.parse_args()

    from storefront.config import Settings
    from storefront.domain import storefront
    from storefront.notification import configure_mail

    storefront.init()
    configure_mail(Settings.from_env())

    engine = Engine(storefront, test_mode=args.test_mode)
    engine.run()


if __name__ == "__main__":
    main()
