from __future__ import annotations

from fastapi import Request

from tripbook.core.config import Settings, get_settings
from tripbook.db.dal import Database


def get_app_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or get_settings()


def get_db(request: Request) -> Database:
    return Database(get_app_settings(request).db_path)
