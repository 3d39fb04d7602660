from league_bracket.db.base import Base
from league_bracket.db.engine import (
    DatabaseConfig,
    create_all,
    create_db_engine,
    create_session_factory,
)

__all__ = [
    "Base",
    "DatabaseConfig",
    "create_all",
    "create_db_engine",
    "create_session_factory",
]
