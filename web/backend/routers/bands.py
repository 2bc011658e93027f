"""Band and membership endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from bandroom.core.session import BandContext
from bandroom.domain.bands import (
    BandMember,
    check_user_is_leader,
    create_band,
    get_band,
    get_band_members,
    invite_member,
    join_band,
)

from ..deps import get_context
from ..schemas import (
    BandCreateRequest,
    BandInfo,
    InviteRequest,
    LeaderResponse,
    MemberInfo,
)

router = APIRouter()


def member_to_info(member: BandMember) -> MemberInfo:
    return MemberInfo(
        band_id=member.band_id,
        user_id=member.user_id,
        role=member.role,
        joined_at=member.joined_at,
    )


@router.post("/bands", response_model=BandInfo, status_code=201)
def add_band(request: BandCreateRequest, ctx: BandContext = Depends(get_context)):
    """Create a band; the caller becomes its leader."""
    try:
        band = create_band(ctx, request.name)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return BandInfo(**band._asdict())


@router.get("/bands/{band_id}", response_model=BandInfo)
def get_band_details(band_id: str, ctx: BandContext = Depends(get_context)):
    return BandInfo(**get_band(ctx.client, band_id)._asdict())


@router.get("/bands/{band_id}/members", response_model=list[MemberInfo])
def list_members(band_id: str, ctx: BandContext = Depends(get_context)):
    return [
        MemberInfo(band_id=band_id, **row) for row in get_band_members(ctx.client, band_id)
    ]


@router.post("/bands/{band_id}/members", response_model=MemberInfo, status_code=201)
def invite(band_id: str, request: InviteRequest, ctx: BandContext = Depends(get_context)):
    """Add an existing account by email (leader only)."""
    try:
        member = invite_member(ctx, band_id, request.email)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return member_to_info(member)


@router.post("/bands/{band_id}/join", response_model=MemberInfo, status_code=201)
def join(band_id: str, ctx: BandContext = Depends(get_context)):
    return member_to_info(join_band(ctx, band_id))


@router.get("/users/{user_id}/is-leader", response_model=LeaderResponse)
def is_leader(user_id: str, ctx: BandContext = Depends(get_context)):
    return LeaderResponse(user_id=user_id, is_leader=check_user_is_leader(ctx.client, user_id))
