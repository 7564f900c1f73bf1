"""Health check route."""

from __future__ import annotations

import msgspec
from litestar import get
from litestar.datastructures import State

from photofeed.db import DatabaseManager


class HealthResponse(msgspec.Struct, kw_only=True):
    """Service health."""

    status: str
    database: bool


@get("/health")
async def health(state: State) -> HealthResponse:
    """Report service and database health."""
    db_manager: DatabaseManager | None = state.get("db_manager")
    database = await db_manager.health_check() if db_manager is not None else False
    return HealthResponse(status="ok", database=database)
