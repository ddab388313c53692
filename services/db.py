"""
services/db.py
────────────────────────────────────────────────────────────────────────
* Async SQLAlchemy v2 setup
* Tables backing the profile / plan stores (JSON payload columns)
* Engine / session factory used by services.store
"""
from __future__ import annotations

from datetime import date, datetime

from sqlalchemy import JSON, Date, DateTime, Integer, String, func
from sqlalchemy.ext.asyncio import (
    AsyncAttrs,
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import Mapped, declarative_base, mapped_column

from config import settings

# ───────── connection helper ────────────────────────────────────────
_ENGINE: AsyncEngine | None = None


def create_engine(url: str | None = None) -> AsyncEngine:
    url = url or settings.database_url
    if not url:
        raise RuntimeError("Set DATABASE_URL to use the SQL stores")
    return create_async_engine(url, pool_pre_ping=True)


def engine() -> AsyncEngine:
    global _ENGINE
    if _ENGINE is None:
        _ENGINE = create_engine()
    return _ENGINE


def session_factory(eng: AsyncEngine | None = None) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(eng or engine(), expire_on_commit=False)


# ───────── declarative base ──────────────────────────────────────────
Base = declarative_base(cls=AsyncAttrs)


class UserProfileRow(Base):
    __tablename__ = "user_profiles"

    user_id: Mapped[str] = mapped_column(String, primary_key=True)
    profile: Mapped[dict] = mapped_column(JSON)      # UserProfile.to_dict()
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now(), onupdate=func.now()
    )


class DietPlanRow(Base):
    __tablename__ = "diet_plans"

    user_id: Mapped[str] = mapped_column(String, primary_key=True)
    start_date: Mapped[date | None] = mapped_column(Date)
    days: Mapped[int] = mapped_column(Integer)
    plans: Mapped[list] = mapped_column(JSON)        # [DayPlan.to_dict(), ...]
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())


async def init_models(eng: AsyncEngine | None = None) -> None:
    """Create missing tables (idempotent)."""
    async with (eng or engine()).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
