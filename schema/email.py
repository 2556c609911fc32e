"""Describes the structure of outgoing emails and the result of sending them."""

from pydantic import BaseModel, Field
from typing import Annotated, Optional, List, Union


class SendEmailOptions(BaseModel):
    """Provider agnostic description of one email."""

    to: Annotated[Union[str, List[str]], Field(description="Recipient email address(es)")]
    subject: str
    body: Annotated[str, Field(description="Plain text body")]
    html_body: Optional[str] = None
    reply_to: Optional[str] = None
    cc: Optional[Union[str, List[str]]] = None
    bcc: Optional[Union[str, List[str]]] = None


class SendEmailResult(BaseModel):
    """Outcome of one delivery attempt. Either `message_id` or `error` is set."""

    success: bool
    message_id: Annotated[Optional[str], Field(default=None, serialization_alias="messageId")]
    error: Optional[str] = None

    @classmethod
    def sent(cls, message_id: str) -> "SendEmailResult":
        return cls(success=True, message_id=message_id)

    @classmethod
    def failed(cls, error: str) -> "SendEmailResult":
        return cls(success=False, error=error)
