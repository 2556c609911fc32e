"""Contains all models commonly used across different modules."""
from enum import Enum
from typing import Optional


class SESErrorCode(str, Enum):
    """Enum for the SES error codes that get a dedicated message."""

    MESSAGE_REJECTED = "MessageRejected"
    MAIL_FROM_DOMAIN_NOT_VERIFIED = "MailFromDomainNotVerifiedException"
    CONFIGURATION_SET_DOES_NOT_EXIST = "ConfigurationSetDoesNotExist"

    @classmethod
    def _missing_(cls, value):
        # SES reports some codes both with and without the "Exception" suffix
        if isinstance(value, str):
            for member in cls:
                if member.value.removesuffix("Exception") == value.removesuffix("Exception"):
                    return member
        return None

    @classmethod
    def from_code(cls, code: Optional[str]) -> Optional["SESErrorCode"]:
        """Return the member for `code`, or None when the code is not a known one."""
        if not code:
            return None
        try:
            return cls(code)
        except ValueError:
            return None


SES_ERROR_MESSAGES: dict[SESErrorCode, str] = {
    SESErrorCode.MESSAGE_REJECTED: "Email was rejected. Please check if the sender email is verified in SES.",
    SESErrorCode.MAIL_FROM_DOMAIN_NOT_VERIFIED: "The sender domain is not verified in SES.",
    SESErrorCode.CONFIGURATION_SET_DOES_NOT_EXIST: "SES configuration set does not exist.",
}

