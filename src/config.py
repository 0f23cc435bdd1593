"""Configuration module for the family schedule backend.

This module provides centralized configuration management, including the
database location, session token settings, access code settings and API
server settings. All configuration values can be overridden via environment
variables.
"""

import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# --- Directory Configuration ---

# Root directory of the project
ROOT_DIR = Path(__file__).parent.parent.resolve()

# Data directory name
DATA_DIR_NAME = "data"
DATA_DIR = ROOT_DIR / DATA_DIR_NAME

# --- Database Configuration ---

DATABASE_URL: str = os.getenv(
    "DATABASE_URL", f"sqlite:///{DATA_DIR}/family_schedule.db"
)

# --- API Server Configuration ---

API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
API_PORT: int = int(os.getenv("API_PORT", "3000"))

# CORS allowed origins (comma-separated list). "*" allows any origin, which is
# what the mobile clients need when no ALLOWED_ORIGIN is pinned.
_CORS_ALLOWED_ORIGINS_STR: str = os.getenv(
    "CORS_ALLOWED_ORIGINS", os.getenv("ALLOWED_ORIGIN", "*")
)
CORS_ALLOWED_ORIGINS: List[str] = [
    origin.strip()
    for origin in _CORS_ALLOWED_ORIGINS_STR.split(",")
    if origin.strip()
]

# --- Logging Configuration ---

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# --- Session Token Configuration ---

DEFAULT_JWT_SECRET_KEY = "change-me-in-production"
JWT_SECRET_KEY: str = os.getenv("JWT_SECRET_KEY", DEFAULT_JWT_SECRET_KEY)
JWT_ALGORITHM: str = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES: int = int(
    os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24 * 7))  # 7 days
)

# --- Password Hashing Configuration ---

# Bcrypt rounds for password hashing (higher = more secure but slower)
BCRYPT_ROUNDS: int = int(os.getenv("BCRYPT_ROUNDS", "12"))

# --- Access Code Configuration ---

# Uppercase letters and digits without the look-alikes I, O, 0 and 1
ACCESS_CODE_ALPHABET: str = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
ACCESS_CODE_LENGTH: int = 5

# How many fresh codes registration tries before giving up
ACCESS_CODE_MAX_ATTEMPTS: int = int(os.getenv("ACCESS_CODE_MAX_ATTEMPTS", "10"))
