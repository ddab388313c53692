"""
scripts/generate_plan.py
────────────────────────────────────────────────────────────────────────
Generate a multi-day diet plan from a profile JSON file and print it:

    python -m scripts.generate_plan --profile me.json
    python -m scripts.generate_plan --profile me.json --days 3 --start-date 2025-01-06

Or for a stored user (needs DATABASE_URL), saving the result back:

    python -m scripts.generate_plan --user 42 --save
"""
from __future__ import annotations

import asyncio
import json
import sys
from argparse import ArgumentParser
from datetime import date
from pathlib import Path
from typing import Any, Dict, List

from dotenv import load_dotenv
load_dotenv()

from config import settings
from core.errors import PlanningError
from core.models.plan import DayPlan
from core.models.profile import UserProfile
from services.planner import build_planner, load_catalog
from services.store import get_plan_store, get_profile_store


def _load_profile(path: Path) -> UserProfile:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("profile JSON must contain an object")
    return UserProfile.from_dict(data)


async def _run(args) -> List[Dict[str, Any]]:
    planner = build_planner(load_catalog(args.catalog))
    start = date.fromisoformat(args.start_date) if args.start_date else date.today()
    user_id = args.user or "cli"

    profile = _load_profile(args.profile) if args.profile else await get_profile_store().get(user_id)
    plans: List[DayPlan] = planner.plan(user_id, args.days, start, profile)

    if args.save:
        await get_plan_store().put(user_id, plans)
        print(f"✓ stored {len(plans)}-day plan for user {user_id}", file=sys.stderr)
    return [p.to_dict() for p in plans]


def main() -> None:
    ap = ArgumentParser()
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--profile", type=Path, help="JSON file with the user profile")
    src.add_argument("--user", help="load the profile of this user-id from the store")
    ap.add_argument("--days", type=int, default=settings.default_plan_days)
    ap.add_argument("--start-date", help="YYYY-MM-DD, defaults to today")
    ap.add_argument("--catalog", help="JSON meal catalog (overrides CATALOG_PATH)")
    ap.add_argument("--save", action="store_true", help="write the plan to the plan store")
    args = ap.parse_args()

    try:
        out = asyncio.run(_run(args))
    except (PlanningError, ValueError) as exc:
        raise SystemExit(f"error: {exc}") from exc
    print(json.dumps(out, indent=2, ensure_ascii=False))


if __name__ == "__main__":  # pragma: no cover
    main()
