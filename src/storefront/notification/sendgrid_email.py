"""SendGrid email adapter."""

from python_http_client.exceptions import HTTPError
from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Category, Mail

from storefront.notification.email_port import AccountEmail, DeliveryReceipt, EmailPort


class SendGridEmailAdapter(EmailPort):
    def __init__(self, api_key: str, sender: str):
        self.client = SendGridAPIClient(api_key)
        self.sender = sender

    def send(self, email: AccountEmail) -> DeliveryReceipt:
        message = Mail(
            from_email=self.sender,
            to_emails=email.to,
            subject=email.subject,
            plain_text_content=email.body,
            html_content=email.html_body,
        )
        message.add_category(Category(email.kind.value))

        try:
            response = self.client.send(message)
        except HTTPError as exc:
            return DeliveryReceipt(sent=False, error=str(exc))

        return DeliveryReceipt(sent=True, message_id=response.headers.get("X-Message-Id"))
