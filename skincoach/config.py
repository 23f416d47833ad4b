# created: 10/16/2026
# last updated: 10/16/2026
# environment settings for the skincoach functions

import os
from typing import List

from dotenv import load_dotenv

from skincoach.errors import ConfigurationError

# a local .env is optional; real deployments set the variables directly
load_dotenv()

#-----------------------------------------------------------------
# fixed limits
#-----------------------------------------------------------------
MAX_IMAGE_BASE64_CHARS = 8_000_000
DEFAULT_MIME_TYPE = "image/jpeg"
SUPPORTED_LANGUAGES = ("en", "fr")

DEFAULT_ALLOWED_ORIGINS = [
    "https://drbn1-40b01.web.app",
    "https://drbn1-40b01.firebaseapp.com",
    "http://localhost:5173",
    "http://localhost:5174",
]

#-----------------------------------------------------------------
# settings read from the environment
#-----------------------------------------------------------------
def get_gemini_api_key() -> str:
    # only ever called while serving a request, never at import time
    api_key = os.environ.get("GEMINI_API_KEY")
    if not api_key:
        raise ConfigurationError(
            "Missing GEMINI_API_KEY. Set it in the runtime environment (or a local .env file) and restart."
        )
    return api_key


def get_gemini_model_name() -> str:
    return os.environ.get("GEMINI_MODEL_NAME", "gemini-1.5-flash")


def get_gemini_timeout() -> float:
    return float(os.environ.get("GEMINI_TIMEOUT_SECONDS", "60"))


def get_allowed_origins() -> List[str]:
    raw = os.environ.get("ALLOWED_ORIGINS")
    if not raw:
        return list(DEFAULT_ALLOWED_ORIGINS)
    return [o.strip() for o in raw.split(",") if o.strip()]


def get_service_name() -> str:
    return os.environ.get("SERVICE_NAME", "skincoach-functions")


def get_log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").upper()


def get_functions_base_url() -> str:
    return os.environ.get("SKINCOACH_FUNCTIONS_URL", "http://localhost:5000").rstrip("/")
