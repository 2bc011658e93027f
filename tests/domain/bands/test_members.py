"""Tests for band membership queries."""

from bandroom.domain.bands import check_user_is_leader, get_band_members


def _members(fake_client):
    fake_client.tables["band_members"] = [
        {"band_id": "band-1", "user_id": "lead", "role": "leader", "joined_at": "2024-01-01"},
        {"band_id": "band-1", "user_id": "bass", "role": "member", "joined_at": "2024-02-01"},
        {"band_id": "band-2", "user_id": "bass", "role": "member", "joined_at": "2023-12-01"},
    ]


def test_leader(fake_client):
    _members(fake_client)

    assert check_user_is_leader(fake_client, "lead") is True
    assert check_user_is_leader(fake_client, "bass") is False
    assert check_user_is_leader(fake_client, "nobody") is False


def test_store_error_means_not_leader(fake_client):
    _members(fake_client)
    fake_client.fail_when = lambda table, op, payload: "boom"

    assert check_user_is_leader(fake_client, "lead") is False


def test_band_members_oldest_first(fake_client):
    _members(fake_client)
    fake_client.tables["band_members"].append(
        {"band_id": "band-1", "user_id": "drums", "role": "member", "joined_at": "2023-06-01"}
    )

    members = get_band_members(fake_client, "band-1")

    assert [m["user_id"] for m in members] == ["drums", "lead", "bass"]
    assert set(members[0]) == {"user_id", "role", "joined_at"}
