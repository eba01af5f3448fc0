"""
Configuration Module
Environment-driven settings for OAuth providers, sessions, CORS and the language model.
"""

import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


# --- Deployment ---
IS_PROD = (
    os.getenv("VERCEL") == "1"
    or os.getenv("ENVIRONMENT", "").lower() == "production"
    or os.getenv("NODE_ENV", "").lower() == "production"
)
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
RELOAD = _env_flag("RELOAD")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# --- Frontend & CORS ---
FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:3001").rstrip("/")
EXTRA_CORS_ORIGINS = [
    origin.strip().rstrip("/")
    for origin in os.getenv("EXTRA_CORS_ORIGINS", "").split(",")
    if origin.strip()
]
CORS_ORIGIN_REGEX = os.getenv("CORS_ORIGIN_REGEX", r"https://.*\.vercel\.app")

# --- Sessions ---
SESSION_SECRET = os.getenv("SESSION_SECRET", "supersecret")
SESSION_COOKIE = os.getenv("SESSION_COOKIE", "nlp_studio.sid")
SESSION_MAX_AGE = 60 * 60 * 24  # 1 day

# --- OAuth: Google ---
GOOGLE_CLIENT_ID = os.getenv("GOOGLE_CLIENT_ID", "")
GOOGLE_CLIENT_SECRET = os.getenv("GOOGLE_CLIENT_SECRET", "")
GOOGLE_CALLBACK_URL = os.getenv("GOOGLE_CALLBACK_URL", "http://localhost:3000/auth/google/callback")

# --- OAuth: Facebook ---
FACEBOOK_CLIENT_ID = os.getenv("FACEBOOK_CLIENT_ID", "")
FACEBOOK_CLIENT_SECRET = os.getenv("FACEBOOK_CLIENT_SECRET", "")
FACEBOOK_CALLBACK_URL = os.getenv("FACEBOOK_CALLBACK_URL", "http://localhost:3000/auth/facebook/callback")

# --- Generative language model ---
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY", "")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-flash-latest")

# --- Local NLP ---
SPACY_MODEL = os.getenv("SPACY_MODEL", "en_core_web_sm")
KEYWORD_LIMIT = int(os.getenv("KEYWORD_LIMIT", "10"))
SUMMARY_FALLBACK_CHARS = int(os.getenv("SUMMARY_FALLBACK_CHARS", "200"))
