import logfire
import uvicorn

from dotenv import load_dotenv

from fastapi import FastAPI

from contextlib import asynccontextmanager

from config import get_settings

from routers import contact

from utils.logger import configure_logfire, instrument_app


# Load environment variables first
load_dotenv()

settings = get_settings()

# Configure logfire BEFORE creating FastAPI app
configure_logfire(settings)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logfire.info("Starting Contact Mailer application...")

    if not settings.SES_FROM_EMAIL:
        logfire.warn("SES_FROM_EMAIL is not set, contact emails will fail until it is configured")
    if not settings.SES_TO_EMAIL:
        logfire.warn("SES_TO_EMAIL is not set, submissions must name their recipients")

    logfire.info(f"Sending email through SES in region {settings.ses_region}")

    yield

    logfire.info("Contact Mailer application shutdown complete")


app = FastAPI(
    title="Contact Mailer API",
    description="Validates contact form submissions and delivers them by email through AWS SES.",
    lifespan=lifespan,
)

instrument_app(app, settings)

app.include_router(contact.router)


if __name__ == "__main__":
    uvicorn.run(app, host=settings.SERVICE_HOST, port=settings.SERVICE_PORT)
