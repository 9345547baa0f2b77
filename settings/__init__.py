"""Application settings."""

import os
from pathlib import Path

# Database
DB_PATH = os.getenv("FAQ_DB_PATH", "faq.duckdb")

# Logging
LOG_DIR = Path("logs")

# Markup cache
CACHE_VERSION = os.getenv("FAQ_CACHE_VERSION", "v1")
CACHE_TTL = int(os.getenv("FAQ_CACHE_TTL", str(6 * 60 * 60)))

# Locale
DEFAULT_LOCALE = os.getenv("FAQ_DEFAULT_LOCALE", "en_US")
SUPPORTED_LOCALES = tuple(os.getenv("FAQ_SUPPORTED_LOCALES", "en_US,fr_CA").split(","))

# Request tokens
TOKEN_SECRET = os.getenv("FAQ_TOKEN_SECRET", "change-me")
TOKEN_TTL = int(os.getenv("FAQ_TOKEN_TTL", str(12 * 60 * 60)))

# Widget
SCHEMA_MAX = int(os.getenv("FAQ_SCHEMA_MAX", "100"))
AJAX_ACTION = "faq_get_faqs"
AJAX_PATH = "/ajax"
ASSET_VERSION = "1.0.1"

# Client
API_BASE_URL = os.getenv("FAQ_API_BASE_URL", "http://127.0.0.1:8000")
API_TIMEOUT = 30
API_RETRIES = 2
