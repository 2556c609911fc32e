"""Defines the structure of contact form requests and responses."""

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, Discriminator, Field, Tag
from typing import Annotated, Any, List, Literal, Optional, Union


def check_email_address(value: str) -> str:
    """Accept a bare, syntactically valid address and return it exactly as typed.

    Display-name forms such as `Name <addr>` are rejected.
    """
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"value is not a valid email address: {e}") from e
    return value


EmailAddress = Annotated[str, AfterValidator(check_email_address)]


def _recipient_shape(value: Any) -> str:
    return "list" if isinstance(value, list) else "address"


# A single address or a list of addresses. Only the branch matching the shape of
# the input is validated, so a bad entry in a list is reported at its index.
Recipients = Annotated[
    Union[
        Annotated[EmailAddress, Tag("address")],
        Annotated[List[EmailAddress], Tag("list")],
    ],
    Discriminator(_recipient_shape),
]


class ContactRequest(BaseModel):
    """Describes a validated contact form submission."""

    model_config = ConfigDict(frozen=True)

    name: Annotated[str, Field(min_length=1, max_length=100)]  # Sender's name
    email: EmailAddress  # Sender's email address
    subject: Optional[Annotated[str, Field(max_length=200)]] = None
    message: Annotated[str, Field(min_length=1, max_length=5000)]
    to: Optional[Recipients] = None  # Overrides the default recipient


class ValidationViolation(BaseModel):
    """One failed constraint of a submission."""

    field: str
    message: str


class ContactSuccessResponse(BaseModel):
    success: Literal[True] = True
    message_id: Annotated[str, Field(serialization_alias="messageId")]


class ContactErrorResponse(BaseModel):
    """Describes the body returned for every failed contact request."""

    success: Literal[False] = False
    error: str
    details: Optional[List[ValidationViolation]] = None
