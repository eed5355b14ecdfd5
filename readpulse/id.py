import hashlib
import re
from datetime import datetime


def _normalize(value: str | int | datetime) -> str:
    if isinstance(value, datetime):
        # Instants are keyed to the second so re-submitting the same session collides
        return value.replace(microsecond=0).isoformat()
    s = str(value).lower()
    s = re.sub(r"[^a-z0-9]", "", s)
    if len(s) > 50:
        s = s[:50]
    return s


def make_id(*parts: str | int | datetime) -> int:
    """Deterministic positive integer id from the given parts."""
    key = ":".join(_normalize(p) for p in parts)
    return int(hashlib.sha256(key.encode()).hexdigest()[:15], 16)
