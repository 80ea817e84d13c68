# config.py

import os
import logging
from typing import List

from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be an integer, got {value!r}")


def _env_list(name: str, default: List[str]) -> List[str]:
    value = os.environ.get(name)
    if value is None:
        return list(default)
    return [item.strip() for item in value.split(",") if item.strip()]


# --- Configuration Constants ---
SERVER_NAME = "dhtml-transpiler"
HOST = os.environ.get("DHTML_HOST", "127.0.0.1")
PORT = _env_int("PORT", 8080)
TRANSPORT = os.environ.get("DHTML_TRANSPORT", "stdio")
TRANSPORTS = ("stdio", "sse", "streamable-http")

# Requests per client within RATE_WINDOW seconds
RATE_LIMIT = _env_int("DHTML_RATE_LIMIT", 100)
RATE_WINDOW = _env_int("DHTML_RATE_WINDOW", 60)

DEFAULT_ALLOWED_ORIGINS = [
    "http://localhost:5173",  # Vite dev server
    "http://localhost:3000",
    "https://doner-html-transpiler.onrender.com",
]
ALLOWED_ORIGINS = _env_list("DHTML_ALLOWED_ORIGINS", DEFAULT_ALLOWED_ORIGINS)

LOG_LEVEL = os.environ.get("DHTML_LOG_LEVEL", "INFO").upper()

# --- Logging Setup ---
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
log = logging.getLogger("dhtml")
