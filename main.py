import logging

import uvicorn

from infrastructure.config import load_settings
from infrastructure.logging_setup import setup_logging
from interfaces.app import create_app

settings = load_settings()
setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = create_app(settings)

logger.info(f"TASKS_DB_PATH: {settings.database_path}")
logger.info(f"OLLAMA_API_URL: {settings.ollama_api_url}")
if not settings.gemini_api_key:
    logger.warning("GEMINI_API_KEY is not set; POST /tasks/gemini will fail")

if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port)
