import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "shop_attendance"),
}

# Civil timezone of the shop; all attendance dates are derived from it
TIMEZONE = os.getenv("TIMEZONE", "America/Costa_Rica")

# 'standard' (8.5 h weekdays, debit hours, 08:00 entry floor) or 'legacy' (8 h, no debit, no floor)
SHIFT_POLICY = os.getenv("SHIFT_POLICY", "standard")

UPLOAD_DIR = os.getenv("UPLOAD_DIR", "uploads")
DEFAULT_REPORT_DAYS = int(os.getenv("DEFAULT_REPORT_DAYS", "7"))

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo users on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
