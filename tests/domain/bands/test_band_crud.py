"""Tests for band creation, invites and joining."""

import pytest

from bandroom.core.exceptions import Unauthenticated
from bandroom.core.session import AuthSession, BandContext
from bandroom.domain.bands import (
    AlreadyMember,
    BandNotFound,
    NotBandLeader,
    UserNotFound,
    add_band_member,
    check_user_is_leader,
    create_band,
    get_member_role,
    invite_member,
    is_valid_email,
    join_band,
)


@pytest.fixture
def band(fake_client):
    """band-1 led by user-1, plus a second account that is not a member."""
    fake_client.tables["bands"] = [{"id": "band-1", "name": "The Testers", "created_by": "user-1"}]
    fake_client.tables["band_members"] = [
        {"id": "m1", "band_id": "band-1", "user_id": "user-1", "role": "leader"}
    ]
    fake_client.tables["users"] = [
        {"id": "user-1", "email": "a@b.c"},
        {"id": "user-2", "email": "sam@example.com"},
    ]
    return fake_client


class TestCreateBand:
    def test_creator_becomes_leader(self, ctx, fake_client):
        band = create_band(ctx, "  Night Owls ")

        assert band.name == "Night Owls"
        assert band.created_by == "user-1"
        assert fake_client.rows("bands")[0]["id"] == band.id
        (member,) = fake_client.rows("band_members")
        assert member["band_id"] == band.id
        assert member["role"] == "leader"
        assert member["joined_at"]
        assert check_user_is_leader(fake_client, "user-1") is True

    def test_blank_name(self, ctx, fake_client):
        with pytest.raises(ValueError):
            create_band(ctx, "   ")
        assert fake_client.calls == []

    def test_requires_session(self, anon_ctx):
        with pytest.raises(Unauthenticated):
            create_band(anon_ctx, "Night Owls")


class TestAddMember:
    def test_adds_member_role(self, band):
        member = add_band_member(band, "band-1", "user-2")

        assert member.role == "member"
        assert get_member_role(band, "band-1", "user-2") == "member"

    def test_duplicate_member(self, band):
        with pytest.raises(AlreadyMember):
            add_band_member(band, "band-1", "user-1")
        assert len(band.rows("band_members")) == 1


class TestInvite:
    def test_leader_invites_by_email(self, ctx, band):
        member = invite_member(ctx, "band-1", "  Sam@Example.com ")

        assert member.user_id == "user-2"
        assert member.band_id == "band-1"

    def test_non_leader_cannot_invite(self, ctx, band):
        band.tables["band_members"][0]["role"] = "member"

        with pytest.raises(NotBandLeader):
            invite_member(ctx, "band-1", "sam@example.com")
        assert band.count_calls("band_members", "insert") == 0

    def test_unknown_email(self, ctx, band):
        with pytest.raises(UserNotFound):
            invite_member(ctx, "band-1", "nobody@example.com")

    def test_invite_existing_member(self, ctx, band):
        invite_member(ctx, "band-1", "sam@example.com")
        with pytest.raises(AlreadyMember):
            invite_member(ctx, "band-1", "sam@example.com")

    @pytest.mark.parametrize("email", ["", "sam", "sam@example", "s am@example.com",
                                       "a@" + "b" * 250 + ".com"])
    def test_malformed_email(self, ctx, band, email):
        assert not is_valid_email(email.strip().lower())
        with pytest.raises(ValueError):
            invite_member(ctx, "band-1", email)
        assert band.calls == []


class TestJoin:
    def test_join_by_link(self, band, config):
        ctx = BandContext(client=band, config=config,
                          session=AuthSession("tok", "user-2", "sam@example.com"))

        member = join_band(ctx, "band-1")

        assert member.role == "member"
        with pytest.raises(AlreadyMember):
            join_band(ctx, "band-1")

    def test_unknown_band(self, ctx, band):
        with pytest.raises(BandNotFound):
            join_band(ctx, "band-404")
