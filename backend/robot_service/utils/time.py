from __future__ import annotations

import datetime as dt
from typing import Optional


def utc_now() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


def isoformat_or_none(ts: Optional[dt.datetime]) -> Optional[str]:
    return ts.isoformat() if ts is not None else None
