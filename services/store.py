"""
services/store.py
────────────────────────────────────────────────────────────────────────
Key-value stores for user profiles and generated plans.

The planning core never touches these; routers and scripts load the
profile, call the planner, then hand the result to the plan store.

*   In-memory stores  – default, and what the tests use
*   SQL stores        – async SQLAlchemy, picked when DATABASE_URL is set
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Dict, List

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from config import settings
from core.models.plan import DayPlan
from core.models.profile import UserProfile
from services.db import DietPlanRow, UserProfileRow, session_factory

_LOG = logging.getLogger(__name__)


# ───────── contracts ─────────────────────────────────────────────────
class ProfileStore(ABC):
    @abstractmethod
    async def get(self, user_id: str) -> UserProfile | None: ...

    @abstractmethod
    async def put(self, user_id: str, profile: UserProfile) -> None: ...


class PlanStore(ABC):
    @abstractmethod
    async def get(self, user_id: str) -> List[DayPlan] | None: ...

    @abstractmethod
    async def put(self, user_id: str, plans: List[DayPlan]) -> None:
        """Replaces whatever plan was stored for the user before."""


# ───────── in-memory ─────────────────────────────────────────────────
class InMemoryProfileStore(ProfileStore):
    def __init__(self) -> None:
        self._rows: Dict[str, UserProfile] = {}

    async def get(self, user_id: str) -> UserProfile | None:
        return self._rows.get(user_id)

    async def put(self, user_id: str, profile: UserProfile) -> None:
        self._rows[user_id] = profile


class InMemoryPlanStore(PlanStore):
    def __init__(self) -> None:
        self._rows: Dict[str, List[DayPlan]] = {}

    async def get(self, user_id: str) -> List[DayPlan] | None:
        plans = self._rows.get(user_id)
        return None if plans is None else list(plans)

    async def put(self, user_id: str, plans: List[DayPlan]) -> None:
        self._rows[user_id] = list(plans)


# ───────── SQL ───────────────────────────────────────────────────────
class SqlProfileStore(ProfileStore):
    def __init__(self, sessions: async_sessionmaker[AsyncSession]) -> None:
        self._sessions = sessions

    async def get(self, user_id: str) -> UserProfile | None:
        async with self._sessions() as db:
            row = await db.get(UserProfileRow, user_id)
            return None if row is None else UserProfile.from_dict(row.profile)

    async def put(self, user_id: str, profile: UserProfile) -> None:
        async with self._sessions() as db:
            await db.merge(UserProfileRow(user_id=user_id, profile=profile.to_dict()))
            await db.commit()
        _LOG.debug("profile stored for user %s", user_id)


class SqlPlanStore(PlanStore):
    def __init__(self, sessions: async_sessionmaker[AsyncSession]) -> None:
        self._sessions = sessions

    async def get(self, user_id: str) -> List[DayPlan] | None:
        async with self._sessions() as db:
            row = await db.get(DietPlanRow, user_id)
            if row is None:
                return None
            return [DayPlan.from_dict(d) for d in row.plans]

    async def put(self, user_id: str, plans: List[DayPlan]) -> None:
        row = DietPlanRow(
            user_id=user_id,
            start_date=plans[0].date if plans else None,
            days=len(plans),
            plans=[p.to_dict() for p in plans],
        )
        async with self._sessions() as db:
            await db.merge(row)
            await db.commit()
        _LOG.debug("plan of %d day(s) stored for user %s", len(plans), user_id)


# ───────── factories (FastAPI dependencies) ──────────────────────────
@lru_cache
def get_profile_store() -> ProfileStore:
    if settings.database_url:
        return SqlProfileStore(session_factory())
    return InMemoryProfileStore()


@lru_cache
def get_plan_store() -> PlanStore:
    if settings.database_url:
        return SqlPlanStore(session_factory())
    return InMemoryPlanStore()
