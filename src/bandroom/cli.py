"""
Bandroom CLI - entry point

Signs in with the configured account and runs one band-library or event
maintenance command.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

import httpx
from loguru import logger
from postgrest.exceptions import APIError

from bandroom.core.config import Config, ensure_directories, load_config
from bandroom.core.console import print_key_values, safe_print
from bandroom.core.exceptions import BandroomError, Unauthenticated
from bandroom.core.output import setup_loguru
from bandroom.core.session import BandContext, create_supabase_client, sign_in

# Project root detection (where pyproject.toml exists)
PROJECT_ROOT = Path(__file__).parent.parent.parent


def _init_logging(config: Config) -> None:
    log_file = Path(config.logging.log_file) if config.logging.log_file else None
    setup_loguru(
        log_file,
        level=config.logging.level,
        console_output=config.logging.console_output,
    )


def build_context(config: Config) -> BandContext:
    """Create the data client and sign in with the configured account.

    Raises:
        ValueError: Data service not configured
        Unauthenticated: Sign-in failed
    """
    client = create_supabase_client(config)
    session = sign_in(client, config.supabase.email, config.supabase.password)
    ctx = BandContext(client=client, config=config, session=session)

    if config.cleanup.run_on_startup:
        from bandroom.domain.events import cleanup_past_events

        cleanup_past_events(ctx)

    return ctx


def run_import_playlist(ctx: BandContext, band_id: str, url: str) -> int:
    """Import a Spotify playlist into a band's library.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    from bandroom.domain.library import import_spotify_playlist

    try:
        result = import_spotify_playlist(ctx, band_id, url)
    except (BandroomError, APIError, httpx.HTTPError):
        # Already reported by the import
        return 1

    print_key_values(
        "Playlist import",
        [("Band", band_id), ("Added", result.added), ("Skipped", result.skipped)],
    )
    return 0


def run_cleanup_events(ctx: BandContext) -> int:
    """Sweep events dated before yesterday."""
    from bandroom.domain.events import cleanup_past_events

    deleted = cleanup_past_events(ctx)
    if deleted is None:
        safe_print("Cleanup skipped or failed - see log for details", style="yellow")
        return 1
    if deleted == 0:
        safe_print("No past events to clean up")
    return 0


def run_is_leader(ctx: BandContext, user_id: Optional[str]) -> int:
    """Print whether a user (default: yourself) leads any band."""
    from bandroom.domain.bands import check_user_is_leader

    user_id = user_id or ctx.require_session().user_id
    is_leader = check_user_is_leader(ctx.client, user_id)
    safe_print(
        f"{user_id} is {'a' if is_leader else 'not a'} band leader",
        style="green" if is_leader else None,
    )
    return 0


def run_create_band(ctx: BandContext, name: str) -> int:
    """Create a band led by the signed-in user."""
    from bandroom.domain.bands import create_band

    try:
        band = create_band(ctx, name)
    except ValueError as e:
        safe_print(f"❌ {e}", style="bold red")
        return 1

    print_key_values("Band created", [("Name", band.name), ("ID", band.id)])
    return 0


def run_profile(ctx: BandContext) -> int:
    """Show the signed-in member's profile."""
    from bandroom.domain.profile import get_user_profile

    try:
        profile = get_user_profile(ctx)
    except BandroomError as e:
        safe_print(f"❌ {e}", style="bold red")
        return 1

    prefs = profile.notification_preferences
    print_key_values(
        "Profile",
        [
            ("Name", profile.full_name),
            ("Email", profile.email),
            ("Instruments", ", ".join(profile.instruments) or None),
            ("Email notifications", prefs.email_notifications),
            ("Practice reminders", prefs.practice_reminders),
            ("Collaboration requests", prefs.new_collaboration_requests),
            ("Message notifications", prefs.message_notifications),
            ("Member since", profile.created_at),
        ],
    )
    return 0


def run_web(host: str, port: int) -> int:
    """Serve the FastAPI backend (run from the project checkout)."""
    import uvicorn

    uvicorn.run("web.backend.main:app", host=host, port=port, app_dir=str(PROJECT_ROOT))
    return 0


def main() -> None:
    """Main entry point for the bandroom command."""
    parser = argparse.ArgumentParser(
        description="Bandroom - rehearsal scheduling and shared song library",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="subcommand", help="Available commands")

    import_parser = subparsers.add_parser(
        "import-playlist", help="Import a Spotify playlist into a band's song library"
    )
    import_parser.add_argument("band_id", help="Band to import into")
    import_parser.add_argument("url", help="Spotify playlist URL")

    subparsers.add_parser("cleanup-events", help="Delete events dated before yesterday")

    leader_parser = subparsers.add_parser(
        "is-leader", help="Check whether a user leads any band"
    )
    leader_parser.add_argument("user_id", nargs="?", help="User ID (default: you)")

    band_parser = subparsers.add_parser("create-band", help="Create a band you lead")
    band_parser.add_argument("name", help="Band name")

    subparsers.add_parser("profile", help="Show your profile")

    web_parser = subparsers.add_parser("web", help="Run the web API")
    web_parser.add_argument("--host", default="127.0.0.1")
    web_parser.add_argument("--port", type=int, default=8642)

    args = parser.parse_args()

    if not args.subcommand:
        parser.print_help()
        sys.exit(1)

    ensure_directories()
    config = load_config()
    _init_logging(config)

    if args.subcommand == "web":
        sys.exit(run_web(args.host, args.port))

    try:
        ctx = build_context(config)
    except (ValueError, Unauthenticated) as e:
        logger.error(f"Could not start session: {e}")
        safe_print(f"❌ {e}", style="bold red")
        sys.exit(1)

    if args.subcommand == "import-playlist":
        sys.exit(run_import_playlist(ctx, args.band_id, args.url))

    elif args.subcommand == "cleanup-events":
        sys.exit(run_cleanup_events(ctx))

    elif args.subcommand == "is-leader":
        sys.exit(run_is_leader(ctx, args.user_id))

    elif args.subcommand == "create-band":
        sys.exit(run_create_band(ctx, args.name))

    elif args.subcommand == "profile":
        sys.exit(run_profile(ctx))


if __name__ == "__main__":
    main()
