"""
Application settings and configuration
"""
import os
from dotenv import load_dotenv

load_dotenv()

class Settings:
    # Application
    APP_NAME = "Hotel Listings API"
    VERSION = "1.0.0"
    DEBUG = os.getenv("DEBUG", "True") == "True"
    API_PREFIX = os.getenv("API_PREFIX", "/api/v1")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Security
    SECRET_KEY = os.getenv("SECRET_KEY", "your-secret-key-change-in-production")
    ALGORITHM = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES = 60 * 24  # 24 hours
    ADMIN_ROLE = "admin"

    # When False, update / delete-one run without an actor and delete-all only
    # needs a valid token (the legacy behaviour).
    STRICT_ADMIN_WRITES = os.getenv("STRICT_ADMIN_WRITES", "True") == "True"

    # CORS
    ALLOWED_ORIGINS = os.getenv(
        "ALLOWED_ORIGINS",
        "http://localhost:3000,http://localhost:5173,http://127.0.0.1:5173",
    ).split(",")

    # Listings
    RECENT_HOTELS_LIMIT = int(os.getenv("RECENT_HOTELS_LIMIT", "4"))

settings = Settings()
