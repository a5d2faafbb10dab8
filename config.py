"""
Configuration for the TeamRAW site backend
Reads environment (and .env) once at import time and exposes module constants.
"""
import logging
import os
from pathlib import Path
from dotenv import load_dotenv

BUILD_VERSION = "v1.2.0-2026.10.19"

# Load environment variables
load_dotenv()

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)
logger = logging.getLogger("config")
logger.info("Build version: %s", BUILD_VERSION)

# Server settings
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
ENVIRONMENT = os.getenv("ENVIRONMENT", "development").lower()
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# Contact message storage (flat JSON file)
DATA_DIR = Path(os.getenv("DATA_DIR", Path(__file__).parent / "data"))
CONTACTS_FILE = Path(os.getenv("CONTACTS_FILE", DATA_DIR / "contacts.json"))

# Admin sessions
JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "dev-secret-key-change-in-prod-min-32-chars")
JWT_ALGORITHM = "HS256"
SESSION_TTL_HOURS = 24
SESSION_COOKIE_NAME = "admin_token"
COOKIE_SECURE = ENVIRONMENT == "production"
BCRYPT_ROUNDS = 10

# Built-in admin (password: admin123). Override with ADMIN_EMAIL / ADMIN_PASSWORD_HASH,
# generate a hash with: python generate_password.py <password>
ADMIN_USERS = (
    {
        "email": os.getenv("ADMIN_EMAIL", "admin@teamraw.com"),
        "password_hash": os.getenv(
            "ADMIN_PASSWORD_HASH",
            "$2b$10$h7ufyonZZsUwUU9Gs88umu10zrklTv3b/3J2GIsy/FUmnyCha4vJO"
        ),
        "role": "ADMIN",
        "name": os.getenv("ADMIN_NAME", "Admin User"),
    },
)

# Cloud LLM settings (OpenRouter, OpenAI-compatible API)
# Auto-detect cloud mode: without a key the chat endpoint runs in demo mode
OPENROUTER_API_KEY = os.getenv("OPENROUTER_API_KEY", "")
USE_CLOUD_LLM = bool(OPENROUTER_API_KEY)
logger.info("USE_CLOUD_LLM=%s (OPENROUTER_API_KEY=%s)", USE_CLOUD_LLM, "set" if OPENROUTER_API_KEY else "not set")
OPENROUTER_BASE_URL = os.getenv("OPENROUTER_BASE_URL", "https://openrouter.ai/api/v1")
CHAT_MODEL = os.getenv("CHAT_MODEL", "nousresearch/hermes-3-llama-3.1-405b:free")
SITE_URL = os.getenv("SITE_URL", "https://teamraw.com")
SITE_TITLE = "TeamRAW Chatbot"

# Generation settings
CHAT_TEMPERATURE = 0.7
CHAT_MAX_TOKENS = 300
CHAT_TIMEOUT = float(os.getenv("CHAT_TIMEOUT", "15"))
