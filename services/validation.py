"""Contains all the logic relating to validation of contact form submissions"""

import logfire

from typing import Any, Union

from pydantic import ValidationError
from pydantic_core import ErrorDetails

from schema.contact import ContactRequest, ValidationViolation


EMAIL_FIELDS = ("email", "to")


def _field_path(loc: tuple) -> str:
    """Build a dotted path such as `to.1` from a pydantic error location.

    Union tags pydantic inserts into the location are dropped, list indexes kept.
    """
    if not loc:
        return "body"
    return ".".join([str(loc[0])] + [str(part) for part in loc[1:] if isinstance(part, int)])


def _violation_message(error: ErrorDetails, payload: dict) -> str:
    field = str(error["loc"][0]) if error["loc"] else "body"
    label = field.capitalize()
    error_type = error["type"]

    if error_type == "missing" or error_type == "string_too_short":
        return f"{label} is required"

    if error_type == "string_too_long":
        return f"{label} must be {error['ctx']['max_length']} characters or less"

    if field in EMAIL_FIELDS and error_type == "value_error":
        if field == "email" and payload.get("email") == "":
            return "Email is required"
        return "Invalid email address"

    if error_type in ("model_type", "model_attributes_type"):
        return "Request body must be a JSON object"

    return error["msg"]


def validate_contact_submission(payload: Any) -> Union[ContactRequest, list[ValidationViolation]]:
    """Validate a contact form `payload` and return the validated submission, or
    every violation found in it.

    All fields are checked; the result never stops at the first failure.

    Args:
        payload (Any): Decoded JSON body of the request

    Returns:
        Union[ContactRequest, list[ValidationViolation]]: The validated submission, or the
        list of violations when at least one constraint failed
    """
    try:
        return ContactRequest.model_validate(payload)
    except ValidationError as e:
        source = payload if isinstance(payload, dict) else {}

        violations: list[ValidationViolation] = []
        for error in e.errors():
            violation = ValidationViolation(
                field=_field_path(error["loc"]),
                message=_violation_message(error, source),
            )
            if violation not in violations:
                violations.append(violation)

        logfire.info(
            f"Contact submission failed validation on fields: {', '.join(v.field for v in violations)}"
        )
        return violations
