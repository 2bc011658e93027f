"""
Configuration management for Bandroom
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass
class SpotifyConfig:
    """Configuration for the Spotify catalog (client-credentials flow)."""

    client_id: str = ""
    client_secret: str = ""
    request_timeout: Optional[float] = None  # None = requests default


@dataclass
class SupabaseConfig:
    """Configuration for the hosted data/auth service."""

    url: str = ""
    key: str = ""  # anon/public key; row access is scoped by the user session
    email: str = ""  # CLI sign-in
    password: str = ""


@dataclass
class CleanupConfig:
    """Configuration for the past-events sweep."""

    strategy: str = "direct"  # 'direct' (table delete) or 'remote' (edge function)
    function_name: str = "delete-past-events"
    run_on_startup: bool = False

    def validate(self) -> None:
        """Validate cleanup configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        valid_strategies = {"direct", "remote"}
        if self.strategy not in valid_strategies:
            raise ValueError(
                f"Invalid cleanup strategy: {self.strategy!r}. "
                f"Valid strategies are: {valid_strategies}"
            )
        if not self.function_name:
            raise ValueError("cleanup.function_name must not be empty")


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = (
        None  # Custom log file path (default: ~/.local/share/bandroom/bandroom.log)
    )
    console_output: bool = False  # Also output to stderr (for debugging)


@dataclass
class NotificationsConfig:
    """Configuration for desktop notifications."""

    enabled: bool = True
    show_success: bool = True
    show_errors: bool = True


@dataclass
class Config:
    """Main configuration object."""

    spotify: SpotifyConfig = field(default_factory=SpotifyConfig)
    supabase: SupabaseConfig = field(default_factory=SupabaseConfig)
    cleanup: CleanupConfig = field(default_factory=CleanupConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    notifications: NotificationsConfig = field(default_factory=NotificationsConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "bandroom"
    return Path.home() / ".config" / "bandroom"


def _find_project_config() -> Optional[Path]:
    """Find config.toml in project root by looking for pyproject.toml.

    Returns:
        Path to config.toml in project root, or None if not found
    """
    try:
        current = Path(__file__).resolve().parent
        for parent in [current] + list(current.parents):
            if (parent / "pyproject.toml").exists():
                config_path = parent / "config.toml"
                if config_path.exists():
                    return config_path
                return None
    except OSError:
        pass
    return None


def get_config_path() -> Path:
    """Get the main configuration file path.

    Checks for config.toml in the following order:
    1. Project root (detected via pyproject.toml) - for development
    2. Current working directory
    3. XDG_CONFIG_HOME/bandroom (or ~/.config/bandroom)
    """
    project_config = _find_project_config()
    if project_config:
        return project_config

    local_config = Path.cwd() / "config.toml"
    if local_config.exists():
        return local_config

    return get_config_dir() / "config.toml"


def get_data_dir() -> Path:
    """Get the data directory path."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "bandroom"
    return Path.home() / ".local" / "share" / "bandroom"


def create_default_config() -> str:
    """Create a default configuration TOML content."""
    return """
# Bandroom Configuration

[spotify]
# Spotify app credentials (client-credentials flow, no user login)
# Create an app at: https://developer.spotify.com/dashboard
# Prefer setting SPOTIFY_CLIENT_ID / SPOTIFY_CLIENT_SECRET in the environment.
# client_id = "your-client-id-here"
# client_secret = "your-client-secret-here"

# Timeout in seconds for catalog requests (unset = no timeout)
# request_timeout = 30

[supabase]
# Project URL and anon key
# url = "https://your-project.supabase.co"
# key = "your-anon-key"

# Account used by the CLI (or BANDROOM_EMAIL / BANDROOM_PASSWORD)
# email = "you@example.com"
# password = "..."

[cleanup]
# How past events are removed: "direct" (table delete) or "remote" (edge function)
strategy = "direct"

# Edge function used when strategy = "remote"
function_name = "delete-past-events"

# Sweep past events whenever the CLI signs in
run_on_startup = false

[logging]
# Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
level = "INFO"

# Custom log file path (default: ~/.local/share/bandroom/bandroom.log)
# log_file = "/path/to/custom/bandroom.log"

# Also output logs to stderr (useful for debugging)
console_output = false

[notifications]
# Enable desktop notifications
enabled = true

# Show success notifications
show_success = true

# Show error notifications
show_errors = true
""".strip()


def load_config() -> Config:
    """Load configuration from file or create default.

    Environment variables override TOML values:
    - SPOTIFY_CLIENT_ID / SPOTIFY_CLIENT_SECRET
    - SUPABASE_URL / SUPABASE_KEY
    - BANDROOM_EMAIL / BANDROOM_PASSWORD
    """
    from dotenv import load_dotenv

    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    config_path = get_config_path()

    if not config_path.exists():
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            f.write(create_default_config())
        print(f"Created default configuration at: {config_path}")
        return _apply_env_overrides(Config())

    try:
        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        print(f"Error loading configuration from {config_path}: {e}")
        print("Using default configuration.")
        return _apply_env_overrides(Config())

    return _apply_env_overrides(parse_config(toml_data))


def parse_config(toml_data: dict) -> Config:
    """Build a Config from parsed TOML data, keeping defaults for missing keys."""
    config = Config()

    if "spotify" in toml_data:
        spotify_data = toml_data["spotify"]
        config.spotify = SpotifyConfig(
            client_id=spotify_data.get("client_id", config.spotify.client_id),
            client_secret=spotify_data.get(
                "client_secret", config.spotify.client_secret
            ),
            request_timeout=spotify_data.get(
                "request_timeout", config.spotify.request_timeout
            ),
        )

    if "supabase" in toml_data:
        supabase_data = toml_data["supabase"]
        config.supabase = SupabaseConfig(
            url=supabase_data.get("url", config.supabase.url),
            key=supabase_data.get("key", config.supabase.key),
            email=supabase_data.get("email", config.supabase.email),
            password=supabase_data.get("password", config.supabase.password),
        )

    if "cleanup" in toml_data:
        cleanup_data = toml_data["cleanup"]
        config.cleanup = CleanupConfig(
            strategy=cleanup_data.get("strategy", config.cleanup.strategy),
            function_name=cleanup_data.get(
                "function_name", config.cleanup.function_name
            ),
            run_on_startup=cleanup_data.get(
                "run_on_startup", config.cleanup.run_on_startup
            ),
        )
        try:
            config.cleanup.validate()
        except ValueError as e:
            print(f"Warning: Invalid cleanup configuration: {e}")
            print("Using default cleanup configuration.")
            config.cleanup = CleanupConfig()

    if "logging" in toml_data:
        logging_data = toml_data["logging"]
        log_file = logging_data.get("log_file")
        if log_file:
            log_file = str(Path(log_file).expanduser())
        config.logging = LoggingConfig(
            level=logging_data.get("level", config.logging.level).upper(),
            log_file=log_file,
            console_output=logging_data.get(
                "console_output", config.logging.console_output
            ),
        )

    if "notifications" in toml_data:
        notifications_data = toml_data["notifications"]
        config.notifications = NotificationsConfig(
            enabled=notifications_data.get(
                "enabled", config.notifications.enabled
            ),
            show_success=notifications_data.get(
                "show_success", config.notifications.show_success
            ),
            show_errors=notifications_data.get(
                "show_errors", config.notifications.show_errors
            ),
        )

    return config


def _apply_env_overrides(config: Config) -> Config:
    """Override credentials with environment variables if present."""
    overrides = {
        "SPOTIFY_CLIENT_ID": (config.spotify, "client_id"),
        "SPOTIFY_CLIENT_SECRET": (config.spotify, "client_secret"),
        "SUPABASE_URL": (config.supabase, "url"),
        "SUPABASE_KEY": (config.supabase, "key"),
        "BANDROOM_EMAIL": (config.supabase, "email"),
        "BANDROOM_PASSWORD": (config.supabase, "password"),
    }
    for env_name, (section, attr) in overrides.items():
        value = os.environ.get(env_name)
        if value:
            setattr(section, attr, value)
    return config


def ensure_directories() -> None:
    """Ensure all necessary directories exist."""
    get_config_dir().mkdir(parents=True, exist_ok=True)
    get_data_dir().mkdir(parents=True, exist_ok=True)
