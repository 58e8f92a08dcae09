import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

ANTHROPIC_API_URL = "https://api.anthropic.com/v1/complete"
ANTHROPIC_MODEL = "claude-3-7-sonnet"
# Placeholder used when no key is configured
ANTHROPIC_API_KEY_PLACEHOLDER = "YOUR_ANTHROPIC_API_KEY"
OLLAMA_API_URL = "http://localhost:11434/api/generate"
OLLAMA_MODEL = "gemma3:1b"
GEMINI_API_URL = "https://generativelanguage.googleapis.com/v1/models/gemini-2.0-flash:generateContent"


@dataclass
class Settings:
    database_path: str = "tasks.db"
    anthropic_api_key: str = ANTHROPIC_API_KEY_PLACEHOLDER
    anthropic_api_url: str = ANTHROPIC_API_URL
    anthropic_model: str = ANTHROPIC_MODEL
    ollama_api_url: str = OLLAMA_API_URL
    ollama_model: str = OLLAMA_MODEL
    gemini_api_key: Optional[str] = None
    gemini_api_url: str = GEMINI_API_URL
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def load_settings() -> Settings:
    """Reads settings from the environment, loading a local .env first if present."""
    load_dotenv(override=False)
    return Settings(
        database_path=os.getenv("TASKS_DB_PATH", "tasks.db"),
        anthropic_api_key=os.getenv("ANTHROPIC_API_KEY") or ANTHROPIC_API_KEY_PLACEHOLDER,
        anthropic_api_url=os.getenv("ANTHROPIC_API_URL", ANTHROPIC_API_URL),
        anthropic_model=os.getenv("ANTHROPIC_MODEL", ANTHROPIC_MODEL),
        ollama_api_url=os.getenv("OLLAMA_API_URL", OLLAMA_API_URL),
        ollama_model=os.getenv("OLLAMA_MODEL", OLLAMA_MODEL),
        gemini_api_key=os.getenv("GEMINI_API_KEY"),
        gemini_api_url=os.getenv("GEMINI_API_URL", GEMINI_API_URL),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_env_int("PORT", 8080),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
