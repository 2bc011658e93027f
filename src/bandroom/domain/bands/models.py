"""Band domain models."""

from typing import Any, Dict, NamedTuple, Optional


class Band(NamedTuple):
    id: str
    name: str
    created_by: Optional[str] = None
    created_at: Optional[str] = None

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Band":
        return cls(
            id=row["id"],
            name=row.get("name", ""),
            created_by=row.get("created_by"),
            created_at=row.get("created_at"),
        )


class BandMember(NamedTuple):
    """One user's membership in one band."""
    band_id: str
    user_id: str
    role: str = "member"  # 'leader' or 'member'
    joined_at: Optional[str] = None
    id: Optional[str] = None

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "BandMember":
        return cls(
            band_id=row.get("band_id"),
            user_id=row.get("user_id"),
            role=row.get("role", "member"),
            joined_at=row.get("joined_at"),
            id=row.get("id"),
        )
