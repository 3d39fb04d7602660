from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from league_bracket.db.base import Base


@dataclass(frozen=True)
class DatabaseConfig:
    database_url: str
    echo: bool = False


def create_db_engine(cfg: DatabaseConfig) -> AsyncEngine:
    return create_async_engine(cfg.database_url, echo=cfg.echo, pool_pre_ping=True)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


async def create_all(engine: AsyncEngine) -> None:
    """Create every mapped table that does not exist yet."""

    import league_bracket.db.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
