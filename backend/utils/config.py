"""Configuration from environment."""
import os

PORT = int(os.environ.get("PORT", "8001"))

# Browsers call the proxy from the dashboard origin; "*" keeps it permissive.
CORS_ALLOW_ORIGINS = [
    o.strip() for o in os.environ.get("CORS_ALLOW_ORIGINS", "*").split(",") if o.strip()
]

# Table names a request may target. Anything else is rejected with 400.
# Names other than unit_type must already exist with the unit_type columns
# (the migration only creates unit_type); a missing table fails with 500.
ALLOWED_TABLES = frozenset(
    t.strip() for t in os.environ.get("ALLOWED_TABLES", "unit_type").split(",") if t.strip()
)

DB_POOL_SIZE = int(os.environ.get("DB_POOL_SIZE", "5"))
DB_MAX_OVERFLOW = int(os.environ.get("DB_MAX_OVERFLOW", "5"))
DB_CONNECT_TIMEOUT_S = int(os.environ.get("DB_CONNECT_TIMEOUT_S", "10"))

RUN_MIGRATIONS = os.environ.get("RUN_MIGRATIONS", "false").lower() == "true"

# Migration target only; request-time connections come from the request config.
# When TESTING=true, use test DB URL so tests never touch production.
if os.environ.get("TESTING") == "true":
    DATABASE_URL = os.environ.get("TESTING_DATABASE_URL", "sqlite:///:memory:")
else:
    DATABASE_URL = os.environ.get("DATABASE_URL", "")
