from __future__ import annotations

import math


def normalize_driver_codes(raw: str) -> tuple[str, ...]:
    """Split a comma-separated driver input into trimmed, upper-cased codes.

    Empty fragments ("VER,,LEC" or a trailing comma) are dropped; order and
    duplicates are kept as typed since order decides colour assignment.
    """
    return tuple(part.strip().upper() for part in raw.split(",") if part.strip())


def format_lap_time(seconds: float | None) -> str:
    if not seconds or (isinstance(seconds, float) and math.isnan(seconds)):
        return "-"
    minutes = int(seconds // 60)
    secs = int(seconds % 60)
    ms = round((seconds % 1) * 1000)
    # 59.9996 rounds to 1000 ms; carry it into the seconds field.
    if ms == 1000:
        ms = 0
        secs += 1
        if secs == 60:
            secs = 0
            minutes += 1
    return f"{minutes}:{secs:02d}.{ms:03d}"
