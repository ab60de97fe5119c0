# config.py
import os

APP_NAME = os.getenv("APP_NAME", "BarrelLab API")
API_VERSION = os.getenv("API_VERSION", "1.0.0")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()
LOG_FORMAT = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

# Used when a request does not name an age group
DEFAULT_AGE_GROUP = os.getenv("DEFAULT_AGE_GROUP", "12U")

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000,http://localhost:5173,http://127.0.0.1:3000,http://127.0.0.1:5173",
    ).split(",")
    if origin.strip()
]

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
