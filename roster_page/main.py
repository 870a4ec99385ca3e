"""Main FastAPI application entry point."""

from pathlib import Path

from dotenv import load_dotenv

from roster_page.config import get_settings
from roster_page.core.app_factory import create_app
from roster_page.logging_config import setup_logging

# Load environment variables from .env file
load_dotenv(Path(__file__).parent.parent / ".env")

settings = get_settings()

# Configure structured logging (JSON to file + console)
setup_logging(settings.log_level)

# Create application; a broken template set raises here
app = create_app(settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "roster_page.main:app",
        host=settings.api_host,
        port=settings.api_port,
    )
