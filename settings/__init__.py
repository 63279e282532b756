"""Application settings."""

import os
from pathlib import Path

# Database
DB_PATH = os.getenv("PA_DB_PATH", "peoples_affairs.duckdb")

# Logging
LOG_DIR = Path("logs")

# API
API_BASE_URL = os.getenv("PA_API_BASE_URL", "http://localhost:5000/api")
API_TIMEOUT = int(os.getenv("PA_API_TIMEOUT", "30"))

# Client session
SESSION_PATH = Path(os.getenv("PA_SESSION_PATH", Path.home() / ".peoples_affairs" / "session.json"))

# Seed operator account
ADMIN_EMAIL = os.getenv("PA_ADMIN_EMAIL", "admin@thepeoplesaffairs.com")
ADMIN_PASSWORD = os.getenv("PA_ADMIN_PASSWORD", "admin123")
ADMIN_FIRST_NAME = "Super"
ADMIN_LAST_NAME = "Admin"

# Password hashing (PBKDF2-HMAC-SHA256)
PASSWORD_ITERATIONS = 100_000
