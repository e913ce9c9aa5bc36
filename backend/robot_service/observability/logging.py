from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Attach a single stream handler to the service's logger tree."""
    root = logging.getLogger("robot_service")
    root.setLevel(level.upper())
    if any(getattr(h, "_robot_service", False) for h in root.handlers):
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._robot_service = True  # type: ignore[attr-defined]
    root.addHandler(handler)
