"""
Past-event expiry sweep.

Deletes every event dated before yesterday (local calendar). Two
interchangeable sweepers exist; configuration picks exactly one:

- DirectDeleteSweeper: deletes from the `events` table with the user's session
- RemoteFunctionSweeper: asks a privileged edge function to do the same delete
"""

from datetime import date
from typing import Optional, Protocol

import httpx
import requests
from loguru import logger
from postgrest.exceptions import APIError

from bandroom.core.config import Config
from bandroom.core.exceptions import (
    BandroomError,
    UpstreamProtocolError,
    UpstreamUnavailable,
)
from bandroom.core.output import log
from bandroom.core.session import BandContext
from bandroom.notifications import notify_success
from bandroom.utils.dates import format_date, get_yesterday

from .crud import EVENTS_TABLE


def get_cleanup_cutoff(today: Optional[date] = None) -> date:
    """Events dated strictly before this day are removed."""
    return get_yesterday(today)


class EventSweeper(Protocol):
    """Deletes events dated before a cutoff and reports how many went."""

    def sweep(self, ctx: BandContext, cutoff: date) -> int: ...


class DirectDeleteSweeper:
    """Delete past events straight from the table."""

    def sweep(self, ctx: BandContext, cutoff: date) -> int:
        response = (
            ctx.client.table(EVENTS_TABLE)
            .delete(count="exact")
            .lt("date", format_date(cutoff))
            .execute()
        )
        return response.count or 0


class RemoteFunctionSweeper:
    """Delegate the delete to an edge function running with elevated rights.

    The function computes its own cutoff server-side.
    """

    def __init__(self, function_name: str):
        self.function_name = function_name

    def function_url(self, config: Config) -> str:
        return f"{config.supabase.url.rstrip('/')}/functions/v1/{self.function_name}"

    def sweep(self, ctx: BandContext, cutoff: date) -> int:
        session = ctx.require_session()
        url = self.function_url(ctx.config)

        try:
            response = requests.post(
                url,
                headers={
                    "Authorization": f"Bearer {session.access_token}",
                    "Content-Type": "application/json",
                },
            )
        except requests.RequestException as e:
            raise UpstreamUnavailable(f"Could not reach {self.function_name}: {e}") from e

        if not response.ok:
            raise UpstreamUnavailable(
                f"Edge function responded with status: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            deleted_count = response.json()["deleted_count"]
        except (ValueError, KeyError, TypeError) as e:
            raise UpstreamProtocolError(
                f"{self.function_name} response has no deleted_count"
            ) from e

        if not isinstance(deleted_count, int):
            raise UpstreamProtocolError(
                f"{self.function_name} returned non-integer deleted_count: {deleted_count!r}"
            )
        return deleted_count


def get_sweeper(config: Config) -> EventSweeper:
    """Pick the sweeper named by ``[cleanup] strategy``.

    Raises:
        ValueError: Unknown strategy
    """
    config.cleanup.validate()
    if config.cleanup.strategy == "remote":
        return RemoteFunctionSweeper(config.cleanup.function_name)
    return DirectDeleteSweeper()


def cleanup_past_events(
    ctx: BandContext,
    sweeper: Optional[EventSweeper] = None,
    today: Optional[date] = None,
) -> Optional[int]:
    """Delete events that ended before yesterday.

    Failures are logged and never raised. A user-facing notice is shown
    only when something was deleted.

    Args:
        ctx: Client context; needs an active session
        sweeper: Sweep implementation (default: from configuration)
        today: Override for the local date (tests)

    Returns:
        Number of deleted events, or None if the sweep was skipped or failed
    """
    if ctx.session is None:
        logger.error("No active session found")
        return None

    cutoff = get_cleanup_cutoff(today)

    try:
        sweeper = sweeper or get_sweeper(ctx.config)
        deleted_count = sweeper.sweep(ctx, cutoff)
    except (BandroomError, APIError, httpx.HTTPError, ValueError) as e:
        logger.error(f"Error cleaning up past events: {e}")
        return None

    logger.info(f"Past events cleanup result: deleted_count={deleted_count} (cutoff {cutoff})")

    if deleted_count > 0:
        message = f"Cleaned up {deleted_count} past events"
        log(f"✓ {message}", level="info")
        notify_success(ctx.config.notifications, message)

    return deleted_count
