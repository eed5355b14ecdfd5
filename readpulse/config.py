import os
from pathlib import Path

DB_PATH = os.environ.get("READPULSE_DB_PATH", str(Path.cwd() / "readpulse.db"))
DATABASE_URL = f"sqlite+aiosqlite:///{DB_PATH}"

LOG_LEVEL = os.environ.get("READPULSE_LOG_LEVEL", "INFO")

# Hour-of-day bucketing falls back to this zone when a user has none set
DEFAULT_TIMEZONE = os.environ.get("READPULSE_DEFAULT_TIMEZONE", "Asia/Kolkata")

# Max sessions fetched per analytics query when the caller gives no limit
DEFAULT_ANALYTICS_LIMIT = int(os.environ.get("READPULSE_ANALYTICS_LIMIT", "100"))

# Analytics policy. Fixed for now; candidates for per-user tuning.
SECONDS_PER_HOUR = 3600
SPEED_TREND_THRESHOLD = 5
RECENT_WINDOW_FRACTION = 0.3
