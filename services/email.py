"""Contains all the code related to the emailing service"""

import boto3
import logfire

from functools import lru_cache
from typing import Any, Dict, List, Optional, Union

from botocore.exceptions import ClientError

from config import Settings, get_settings
from models.helpers import SESErrorCode, SES_ERROR_MESSAGES
from schema.email import SendEmailOptions, SendEmailResult

from .template import TemplateService


CHARSET = "UTF-8"

MISSING_SENDER_ERROR = (
    "SES_FROM_EMAIL environment variable is required. "
    "Please set it in your .env file."
)
MISSING_RECIPIENT_ERROR = "No recipient specified and SES_TO_EMAIL is not configured"
NO_RECIPIENTS_ERROR = "At least one recipient email address is required"
UNEXPECTED_SEND_ERROR = "An unexpected error occurred while sending the email"


def normalize_emails(emails: Union[str, List[str], None]) -> List[str]:
    """Normalize one address, a list of addresses or nothing to a list."""
    if not emails:
        return []
    if isinstance(emails, str):
        return [emails]
    return list(emails)


def describe_send_error(error: Exception) -> str:
    """Translate an exception raised while calling SES into a readable message.

    Known SES error codes map to a fixed message, any other error keeps its own
    message.
    """
    if isinstance(error, ClientError):
        details = error.response.get("Error", {})
        code = SESErrorCode.from_code(details.get("Code"))
        if code is not None:
            return SES_ERROR_MESSAGES[code]
        return details.get("Message") or str(error)

    return str(error) or UNEXPECTED_SEND_ERROR


class EmailService:
    """Service for handling email operations through AWS SES."""

    def __init__(
        self,
        ses_client: Any,
        from_email: Optional[str],
        default_to_email: Optional[str] = None,
        template_service: Optional[TemplateService] = None,
    ):
        self.ses_client = ses_client
        self.from_email = from_email
        self.default_to_email = default_to_email
        self.template_service = template_service or TemplateService()

    @classmethod
    def from_settings(cls, settings: Settings) -> "EmailService":
        """Build the service and its SES client from `settings`."""
        return cls(
            ses_client=boto3.client("ses", region_name=settings.ses_region),
            from_email=settings.SES_FROM_EMAIL,
            default_to_email=settings.SES_TO_EMAIL,
        )

    def send_email(self, options: SendEmailOptions) -> SendEmailResult:
        """Send an email.

        Args:
            options (SendEmailOptions): Recipients, subject and content of the email

        Returns:
            SendEmailResult: The SES message id on success, otherwise a description of the failure.
            Never raises.
        """
        if not self.from_email:
            logfire.warn("Refusing to send email: SES_FROM_EMAIL is not configured")
            return SendEmailResult.failed(MISSING_SENDER_ERROR)

        to_addresses = normalize_emails(options.to)

        if not to_addresses:
            return SendEmailResult.failed(NO_RECIPIENTS_ERROR)

        request = self._build_request(options, to_addresses)

        try:
            response = self.ses_client.send_email(**request)
            message_id = response["MessageId"]
        except Exception as e:
            error = describe_send_error(e)
            logfire.error(f"SES send email error: {error} ({e!r})")
            return SendEmailResult.failed(error)

        logfire.info(
            f"Email sent successfully to {len(to_addresses)} recipient(s) with MessageId: {message_id}"
        )
        return SendEmailResult.sent(message_id)

    def _build_request(
        self, options: SendEmailOptions, to_addresses: List[str]
    ) -> Dict[str, Any]:
        """Create the keyword arguments of the SES `send_email` call.

        Empty CC/BCC lists, a missing HTML part and a missing reply-to are left out
        of the request entirely.
        """
        destination: Dict[str, List[str]] = {"ToAddresses": to_addresses}

        cc_addresses = normalize_emails(options.cc)
        bcc_addresses = normalize_emails(options.bcc)

        if cc_addresses:
            destination["CcAddresses"] = cc_addresses
        if bcc_addresses:
            destination["BccAddresses"] = bcc_addresses

        body: Dict[str, Dict[str, str]] = {
            "Text": {"Data": options.body, "Charset": CHARSET},
        }
        if options.html_body:
            body["Html"] = {"Data": options.html_body, "Charset": CHARSET}

        request: Dict[str, Any] = {
            "Source": self.from_email,
            "Destination": destination,
            "Message": {
                "Subject": {"Data": options.subject, "Charset": CHARSET},
                "Body": body,
            },
        }
        if options.reply_to:
            request["ReplyToAddresses"] = [options.reply_to]

        return request

    def send_contact_email(
        self,
        name: str,
        email: str,
        message: str,
        subject: Optional[str] = None,
        to: Union[str, List[str], None] = None,
    ) -> SendEmailResult:
        """Format a contact form submission and send it.

        Replies go to the person who submitted the form.

        Args:
            name (str): Sender's name
            email (str): Sender's email address
            message (str): Message body
            subject (Optional[str], optional): Subject of the submission. Defaults to `[Contact Form] Message from {name}`.
            to (Union[str, List[str], None], optional): Recipient(s). Defaults to SES_TO_EMAIL.

        Returns:
            SendEmailResult: The result of sending the email.
        """
        if to is None and not self.default_to_email:
            logfire.warn("Refusing to send contact email: no recipient and SES_TO_EMAIL is not configured")
            return SendEmailResult.failed(MISSING_RECIPIENT_ERROR)

        # An explicit recipient list, even an empty one, is never replaced by the default
        recipients = to if to is not None else self.default_to_email

        email_subject = subject or f"[Contact Form] Message from {name}"

        return self.send_email(
            SendEmailOptions(
                to=recipients,
                subject=email_subject,
                body=self.template_service.render_contact_text(name, email, message, subject),
                html_body=self.template_service.render_contact_email(name, email, message, subject),
                reply_to=email,
            )
        )


@lru_cache
def get_email_service() -> EmailService:
    """Return the process wide email service, built from the settings on first use."""
    return EmailService.from_settings(get_settings())
