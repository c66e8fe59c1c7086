"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

DEFAULT_REPORT_DAYS = 7
DEFAULT_TIMEZONE = "America/Costa_Rica"
DEFAULT_ENTRY_FLOOR = time(8, 0)
HOURS_DECIMALS = 2
UPLOADS_URL_PREFIX = "/uploads/"
DEFAULT_PHOTO_EXTENSION = ".jpg"
PHOTO_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".webp"})
