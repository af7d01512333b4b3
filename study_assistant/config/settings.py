"""
Environment-driven configuration for AI Study Assistant.

Values are read once at import time. A local .env file is loaded first so
development setups don't need exported variables.
"""
import os
from typing import Optional

from dotenv import load_dotenv

# Must run before any os.getenv() calls below
load_dotenv()


def get_api_key() -> Optional[str]:
    """
    Resolve the Gemini API credential.

    Priority:
    1. API_KEY
    2. GOOGLE_API_KEY (the name langchain-google-genai looks for)

    Returns:
        The key, or None when neither variable is set to a non-blank value
    """
    for name in ("API_KEY", "GOOGLE_API_KEY"):
        value = os.getenv(name)
        if value and value.strip():
            return value.strip()
    return None


# --- API Keys ---
API_KEY = get_api_key()

# --- Model Configuration ---
LLM_MODEL = os.getenv("LLM_MODEL", "gemini-2.5-flash")
LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0.7"))

# --- Request Lifecycle ---
# Bounded wait for one generation call; failures are never retried automatically
REQUEST_TIMEOUT_SECONDS = float(os.getenv("REQUEST_TIMEOUT_SECONDS", "60"))

# --- UI Configuration ---
DEFAULT_THEME = os.getenv("DEFAULT_THEME", "dark").lower()
GRADIO_SERVER_NAME = os.getenv("GRADIO_SERVER_NAME", "0.0.0.0")
GRADIO_SERVER_PORT = int(os.getenv("GRADIO_SERVER_PORT", "7860"))

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
