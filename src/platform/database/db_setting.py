"""
Database entry points

Models import `Base` from here; the DI container builds `Database`.
"""

from src.platform.database.orm_db_setting import (
    Base,
    Database,
    dispose_engines,
    get_engine,
    get_session_maker,
)

__all__ = [
    'Base',
    'Database',
    'dispose_engines',
    'get_engine',
    'get_session_maker',
]
