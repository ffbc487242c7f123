# teamdesk/config.py
# Load .env from the project root once, then read everything through os.getenv
import os
import pathlib

from dotenv import load_dotenv, find_dotenv

ROOT = pathlib.Path(__file__).resolve().parent.parent

env_path = ROOT / ".env"
if not env_path.exists():
    env_path = find_dotenv()

load_dotenv(env_path)


def _flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# ---------------------------
# Database
# ---------------------------
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./teamdesk.db")
SQL_ECHO = _flag("SQL_ECHO")

# ---------------------------
# Auth
# ---------------------------
JWT_SECRET = os.getenv("JWT_SECRET", "devsecret123")
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES") or 120)
SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "session")
COOKIE_SECURE = _flag("COOKIE_SECURE")

# ---------------------------
# HTTP
# ---------------------------
CORS_ORIGINS = [
    o.strip()
    for o in os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000,http://localhost:5173,http://127.0.0.1:5173",
    ).split(",")
    if o.strip()
]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# ---------------------------
# AI chat (any OpenAI-compatible endpoint, Groq by default)
# ---------------------------
AI_CHAT_API_KEY = os.getenv("AI_CHAT_API_KEY") or os.getenv("GROQ_API_KEY")
AI_CHAT_BASE_URL = os.getenv("AI_CHAT_BASE_URL", "https://api.groq.com/openai/v1")
AI_CHAT_MODEL = os.getenv("AI_CHAT_MODEL", "llama-3.1-8b-instant")
