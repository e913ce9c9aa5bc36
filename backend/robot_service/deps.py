from __future__ import annotations

from fastapi import Request
from fastapi.requests import HTTPConnection

from robot_service.services.auto_step import AutoStepScheduler
from robot_service.services.fleet import Fleet


def get_fleet(conn: HTTPConnection) -> Fleet:
    return conn.app.state.fleet


def get_scheduler(request: Request) -> AutoStepScheduler:
    return request.app.state.scheduler


def get_hub(conn: HTTPConnection):
    return conn.app.state.hub
