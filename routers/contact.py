"""
Contact router for handling contact form submissions.
"""

import json
import logfire

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from services.email import EmailService, get_email_service
from services.validation import validate_contact_submission

from schema.contact import ContactErrorResponse, ContactSuccessResponse

from typing import Annotated, Callable

router = APIRouter(
    prefix="/api/contact",
    tags=["Contact"],
)

CORS_PREFLIGHT_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def email_service_factory() -> Callable[[], EmailService]:
    """Return the builder the route calls to obtain the email service."""
    return get_email_service


def _error_response(status_code: int, error: ContactErrorResponse) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=error.model_dump(mode="json", exclude_none=True),
    )


@router.post(
    "",
    status_code=status.HTTP_200_OK,
    response_model=ContactSuccessResponse,
    responses={
        400: {"model": ContactErrorResponse},
        500: {"model": ContactErrorResponse},
    },
)
async def submit_contact_form(
    request: Request,
    build_email_service: Annotated[Callable[[], EmailService], Depends(email_service_factory)],
):
    """This endpoint validates a contact form submission and emails it through AWS SES.

    ### Request body
        - name: sender's name (required, up to 100 characters)
        - email: sender's email address (required)
        - subject: email subject (optional, up to 200 characters)
        - message: message body (required, up to 5000 characters)
        - to: recipient address or list of addresses (optional)
    """
    with logfire.span("Handling contact form submission..."):
        try:
            body = await request.body()

            try:
                payload = json.loads(body)
            except (json.JSONDecodeError, UnicodeDecodeError):
                logfire.info("Rejected contact submission with malformed JSON body")
                return _error_response(
                    status.HTTP_400_BAD_REQUEST,
                    ContactErrorResponse(error="Invalid JSON in request body"),
                )

            validated = validate_contact_submission(payload)

            if isinstance(validated, list):
                return _error_response(
                    status.HTTP_400_BAD_REQUEST,
                    ContactErrorResponse(error="Validation failed", details=validated),
                )

            email_service = build_email_service()

            # boto3 blocks, keep it off the event loop
            result = await run_in_threadpool(
                email_service.send_contact_email,
                name=validated.name,
                email=validated.email,
                subject=validated.subject,
                message=validated.message,
                to=validated.to,
            )

            if not result.success:
                logfire.error(f"Failed to send contact email: {result.error}")
                return _error_response(
                    status.HTTP_500_INTERNAL_SERVER_ERROR,
                    ContactErrorResponse(error=result.error or "Failed to send email"),
                )

            return JSONResponse(
                status_code=status.HTTP_200_OK,
                content=ContactSuccessResponse(message_id=result.message_id).model_dump(
                    mode="json", by_alias=True
                ),
            )
        except Exception as e:
            logfire.exception(f"Contact API error: {str(e)}")
            return _error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                ContactErrorResponse(error="An unexpected error occurred"),
            )


@router.options("", status_code=status.HTTP_204_NO_CONTENT)
async def contact_form_preflight():
    """Answer CORS preflight requests for the contact endpoint."""
    return Response(status_code=status.HTTP_204_NO_CONTENT, headers=CORS_PREFLIGHT_HEADERS)
