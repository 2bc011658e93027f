"""Profile endpoints for the signed-in member."""

from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException

from bandroom.core.session import BandContext
from bandroom.domain.profile import (
    NotificationPreferences,
    UserProfile,
    get_user_profile,
    update_user_profile,
)

from ..deps import get_context
from ..schemas import ProfileInfo, ProfileUpdateRequest

router = APIRouter()


def profile_to_info(profile: UserProfile) -> ProfileInfo:
    return ProfileInfo(**asdict(profile))


@router.get("/profile", response_model=ProfileInfo)
def get_profile(ctx: BandContext = Depends(get_context)):
    return profile_to_info(get_user_profile(ctx))


@router.put("/profile", response_model=ProfileInfo)
def put_profile(request: ProfileUpdateRequest, ctx: BandContext = Depends(get_context)):
    session = ctx.require_session()
    profile = UserProfile(
        id=session.user_id,
        email=session.email or "",
        full_name=request.full_name,
        instruments=request.instruments,
        notification_preferences=NotificationPreferences(
            **request.notification_preferences.model_dump()
        ),
    )
    try:
        updated = update_user_profile(ctx, profile)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return profile_to_info(updated)
