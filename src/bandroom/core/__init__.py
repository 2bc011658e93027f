"""Core infrastructure layer - no business logic dependencies.

This module provides foundation-level services:
- Configuration management (TOML)
- Hosted data/auth client and session context
- Logging and console output
- Exception taxonomy
"""

from .config import (
    Config,
    create_default_config,
    ensure_directories,
    get_config_dir,
    get_config_path,
    get_data_dir,
    load_config,
)
from .exceptions import (
    BandroomError,
    InvalidReference,
    Unauthenticated,
    UpstreamProtocolError,
    UpstreamUnavailable,
)
from .session import (
    AuthSession,
    BandContext,
    create_supabase_client,
    get_active_session,
    session_from_token,
    sign_in,
)

__all__ = [
    # Config
    "Config",
    "create_default_config",
    "ensure_directories",
    "get_config_dir",
    "get_config_path",
    "get_data_dir",
    "load_config",
    # Exceptions
    "BandroomError",
    "InvalidReference",
    "Unauthenticated",
    "UpstreamProtocolError",
    "UpstreamUnavailable",
    # Session
    "AuthSession",
    "BandContext",
    "create_supabase_client",
    "get_active_session",
    "session_from_token",
    "sign_in",
]
