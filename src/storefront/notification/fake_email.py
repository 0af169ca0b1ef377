"""Fake email adapter: keeps sent messages in memory."""

from uuid import uuid4

from storefront.notification.email_port import AccountEmail, DeliveryReceipt, EmailPort


class FakeEmailAdapter(EmailPort):
    def __init__(self):
        self.sent_emails: list[dict] = []
        self.should_succeed = True
        self.failure_reason = "Email delivery failed"

    def configure(self, should_succeed: bool = True, failure_reason: str = "Email delivery failed"):
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def send(self, email: AccountEmail) -> DeliveryReceipt:
        if not self.should_succeed:
            return DeliveryReceipt(sent=False, error=self.failure_reason)

        message_id = f"email-{uuid4().hex[:12]}"
        self.sent_emails.append(
            {
                "message_id": message_id,
                "kind": email.kind.value,
                "to": email.to,
                "subject": email.subject,
                "body": email.body,
                "html_body": email.html_body,
            }
        )
        return DeliveryReceipt(sent=True, message_id=message_id)

    def reset(self):
        self.sent_emails.clear()
        self.configure()
