"""Email bodies for account messages."""


class WelcomeTemplate:
    @staticmethod
    def render(context: dict) -> dict:
        return {
            "subject": "Sign Up succesfull!",
            "body": (
                f"Hi {context['email']},\n\n"
                "You successfully signed up. Happy shopping!\n"
            ),
            "html_body": "<h1>You successfully signed up!</h1>",
        }


class PasswordResetTemplate:
    @staticmethod
    def render(context: dict) -> dict:
        link = f"{context['base_url']}/reset/{context['token']}"
        return {
            "subject": "Reset Password",
            "body": (
                "You requested a password reset.\n\n"
                f"Open {link} to set a new password. The link is valid for an hour.\n"
            ),
            "html_body": (
                "<p>You requested a password reset</p>"
                f'<p>Click this <a href="{link}">link</a> to set a new password, it is valid for an hour</p>'
            ),
        }
