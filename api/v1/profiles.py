from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from services.store import ProfileStore, get_profile_store
from api.v1.schemas import ProfileIn, ProfileOut

router = APIRouter()


# ───────────────────────── read ─────────────────────────────
@router.get(
    "/{user_id}/profile",
    response_model=ProfileOut,
    status_code=status.HTTP_200_OK,
)
async def get_profile(
    user_id: str,
    store: ProfileStore = Depends(get_profile_store),
) -> ProfileOut:
    profile = await store.get(user_id)
    if profile is None:
        raise HTTPException(404, "profile not set")
    return ProfileOut.from_profile(user_id, profile)


# ───────────────────────── upsert ───────────────────────────
@router.put(
    "/{user_id}/profile",
    response_model=ProfileOut,
    status_code=status.HTTP_200_OK,
)
async def upsert_profile(
    user_id: str,
    body: ProfileIn,
    store: ProfileStore = Depends(get_profile_store),
) -> ProfileOut:
    profile = body.to_profile()
    await store.put(user_id, profile)
    return ProfileOut.from_profile(user_id, profile)
