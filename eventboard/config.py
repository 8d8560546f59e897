"""
Runtime configuration for the event board.
Values come from the environment, with a local .env file loaded first.
"""

import os
from typing import Any, Dict, List

from dotenv import load_dotenv

# Load .env variables from the project root
load_dotenv()

# --- DEFAULTS ---
DEFAULT_SANDBOX = "2408-Bertha-Wang"
API_HOST = "https://fsa-crud-2aa9294fe819.herokuapp.com"
DEFAULT_CORS_ORIGINS = [
    "http://localhost:5050",  # Local development gateway
    "http://localhost:5500",  # Local development (some editors)
    "http://localhost:8080",  # Local static server
]


def build_api_url(sandbox: str) -> str:
    """
    Build the events collection URL for a sandbox.

    Args:
        sandbox (str): The sandbox (cohort) name on the CRUD API.

    Returns:
        str: The collection URL, always ending with a slash.
    """
    return f"{API_HOST}/api/{sandbox}/events/"


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def load_config() -> Dict[str, Any]:
    """
    Read the application settings from the environment.

    Returns:
        dict: Flask config keys (EVENTS_API_URL, EVENTS_API_TIMEOUT,
              GATEWAY_PORT, CORS_ORIGINS, LOG_LEVEL).
    """
    sandbox = os.getenv("EVENTS_API_SANDBOX", DEFAULT_SANDBOX)

    api_url = os.getenv("EVENTS_API_URL") or build_api_url(sandbox)
    if not api_url.endswith("/"):
        api_url += "/"

    origins = os.getenv("CORS_ORIGINS")

    return {
        "EVENTS_API_URL": api_url,
        "EVENTS_API_TIMEOUT": float(os.getenv("EVENTS_API_TIMEOUT", 10)),
        "GATEWAY_PORT": int(os.getenv("GATEWAY_PORT", 5050)),
        "CORS_ORIGINS": _split_origins(origins) if origins else list(DEFAULT_CORS_ORIGINS),
        "LOG_LEVEL": os.getenv("LOG_LEVEL", "INFO").upper(),
    }
