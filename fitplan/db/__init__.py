"""Database package: engine, session, base."""

from fitplan.db.session import (
    create_engine_for,
    create_engine_from_settings,
    create_session_maker,
    init_db,
    session_scope,
)

__all__ = [
    "create_engine_for",
    "create_engine_from_settings",
    "create_session_maker",
    "init_db",
    "session_scope",
]
