"""Application configuration and constants."""
import os
from pathlib import Path

# Directory paths
BASE_DIR = Path(__file__).resolve().parent.parent

# Database location (SQLite file)
DATABASE_PATH = Path(os.environ.get("RESCUE_DATABASE_PATH", str(BASE_DIR / "animal_rescue.db")))

# Seed the animal catalogue on first start
SEED_DATA = os.environ.get("RESCUE_SEED_DATA", "true").lower() in {"1", "true", "yes"}

# Logging
LOG_LEVEL = os.environ.get("RESCUE_LOG_LEVEL", "INFO")
JSON_LOGS = os.environ.get("RESCUE_JSON_LOGS", "false").lower() in {"1", "true", "yes"}

# Identity forwarded by the upstream SSO gateway
USER_HEADER = os.environ.get("RESCUE_USER_HEADER", "X-Auth-User")
AUTHORITIES_HEADER = os.environ.get("RESCUE_AUTHORITIES_HEADER", "X-Auth-Authorities")

# Capability required to submit, edit or withdraw adoption requests
ADOPTION_REQUEST_CAPABILITY = "adoption.request"

# HTTP server
HOST = os.environ.get("RESCUE_HOST", "0.0.0.0")
PORT = int(os.environ.get("RESCUE_PORT", "8080"))
