"""
utils/time_utils.py

Purpose: Time helpers

- ISO-8601 timestamps for document records
- Epoch milliseconds for stored upload filenames
"""

import time
from datetime import datetime, timezone


def utc_now_iso() -> str:
    """
    Current UTC time as ISO-8601 with millisecond precision and a Z suffix,
    e.g. 2024-05-01T12:00:00.123Z
    """
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def epoch_millis() -> int:
    return int(time.time() * 1000)
