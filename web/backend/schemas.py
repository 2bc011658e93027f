from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class SongInfo(BaseModel):
    id: Optional[str] = None
    band_id: Optional[str] = None
    title: str
    artist: str
    spotify_link: Optional[str] = None
    song_sheet_path: Optional[str] = None
    created_by: Optional[str] = None
    created_at: Optional[str] = None


class SongRequest(BaseModel):
    title: str = Field(min_length=1)
    artist: str = Field(min_length=1)
    spotify_link: Optional[str] = None
    song_sheet_path: Optional[str] = None


class SpotifyImportRequest(BaseModel):
    playlist_url: str


class SpotifyImportResponse(BaseModel):
    added: int
    skipped: int
    message: str


class EventInfo(BaseModel):
    id: Optional[str] = None
    band_id: Optional[str] = None
    title: str
    date: date
    start_time: str
    event_type: str
    location: Optional[str] = None
    created_by: Optional[str] = None


class EventRequest(BaseModel):
    title: str = Field(min_length=1)
    date: date
    start_time: str  # HH:MM
    event_type: str = "rehearsal"
    location: Optional[str] = None


class CleanupResponse(BaseModel):
    deleted_count: Optional[int] = None  # None when the sweep failed
    success: bool


class NotificationPreferencesInfo(BaseModel):
    email_notifications: bool = True
    practice_reminders: bool = True
    new_collaboration_requests: bool = True
    message_notifications: bool = True


class ProfileInfo(BaseModel):
    id: str
    email: str
    full_name: str
    instruments: list[str] = []
    notification_preferences: NotificationPreferencesInfo
    created_at: Optional[str] = None


class ProfileUpdateRequest(BaseModel):
    full_name: str
    instruments: list[str] = []
    notification_preferences: NotificationPreferencesInfo = NotificationPreferencesInfo()


class LeaderResponse(BaseModel):
    user_id: str
    is_leader: bool


class BandInfo(BaseModel):
    id: str
    name: str
    created_by: Optional[str] = None
    created_at: Optional[str] = None


class BandCreateRequest(BaseModel):
    name: str = Field(min_length=1)


class MemberInfo(BaseModel):
    band_id: str
    user_id: str
    role: str
    joined_at: Optional[str] = None


class InviteRequest(BaseModel):
    email: str


class SetlistSongRequest(BaseModel):
    song_id: str
    notes: Optional[str] = None


class SetlistRequest(BaseModel):
    songs: list[SetlistSongRequest] = []


class SetlistEntryInfo(BaseModel):
    song_id: str
    position: int
    notes: Optional[str] = None


class SetlistInfo(BaseModel):
    id: str
    event_id: str
    created_by: Optional[str] = None
    entries: list[SetlistEntryInfo]
