"""Universal logfire for the application."""

import logfire
from fastapi import FastAPI

from config import Settings


def configure_logfire(settings: Settings):
    """Configure logfire once for the process. Nothing is sent without a write token."""
    logfire.configure(
        token=settings.LOGFIRE_WRITE_TOKEN,
        service_name=settings.SERVICE_NAME,
        send_to_logfire="if-token-present",
    )


def instrument_app(app: FastAPI, settings: Settings):
    """Instrument the FastAPI app for better observability, when enabled."""
    if settings.LOGFIRE_INSTRUMENT:
        logfire.instrument_fastapi(app)
        logfire.info("FastAPI application instrumented with logfire")
