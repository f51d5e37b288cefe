"""
FastAPI application for the notification demo.

Every request builds its own NotificationService, injecting the notifier
for the requested channel and a ConsoleLogger. Output is captured into a
buffer instead of stdout and returned in the response.

Run with:
    uv run uvicorn api.main:app --reload

Then visit http://localhost:8000/docs for interactive API documentation.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(name)-24s | %(levelname)-5s | %(message)s",
    datefmt="%H:%M:%S",
)

from notifications.demo import capture_demo, capture_notification
from notifications.models import DemoResult, NotificationRequest, NotificationResponse


# Application lifespan
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown."""
    logging.info("Starting SOLID Notification Demo API")
    yield
    logging.info("Shutting down")


# Create the FastAPI app
app = FastAPI(
    title="SOLID Notification Demo",
    description="""
    A toy notification service showing the SOLID principles.

    ## Endpoints

    - `/notify` - Send one notification through the email or SMS notifier
    - `/demo` - Run the built-in scenarios (email to John, SMS to Alice)
    """,
    version="1.0.0",
    lifespan=lifespan,
)


@app.get("/health", tags=["Health"])
def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "solid-notifications"}


@app.post("/notify", response_model=NotificationResponse, tags=["Notifications"])
def send_notification(request: NotificationRequest) -> NotificationResponse:
    """
    Send a single notification.

    The channel picks which notifier is injected into the service.
    Nothing else about the service changes between channels.
    """
    return capture_notification(request)


@app.post("/demo", response_model=DemoResult, tags=["Demo"])
def run_demo() -> DemoResult:
    """Run both demo scenarios and return what each one wrote."""
    return capture_demo()
