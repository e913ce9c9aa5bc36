"""Run the service with uvicorn: ``python -m robot_service``."""

from __future__ import annotations

import uvicorn

from robot_service.config import settings


def main() -> None:
    uvicorn.run(
        "robot_service.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
