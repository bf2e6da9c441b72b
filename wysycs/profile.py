"""
Guardian profile and community gamification data.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .api import APIError, DEFAULT_LEADERBOARD_LIMIT, WysycsAPIClient
from .forest_utils import level_emoji
from .i18n import Translator
from .models import CommunityStats, Guardian, GuardianProgress, Leaderboard

logger = logging.getLogger(__name__)

TOP_RANK_BADGE = "👑"


@dataclass
class ProfileLookup:
    """Result of looking up a guardian: either data or an error message."""
    guardian: Optional[Guardian] = None
    progress: Optional[GuardianProgress] = None
    error: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.guardian is not None


def load_guardian_profile(
    client: WysycsAPIClient,
    email: str,
    translator: Optional[Translator] = None,
) -> ProfileLookup:
    """
    Fetch a guardian and their level progress.

    An empty email is rejected without a request. Any failure clears both
    records and reports the guardian as not found.
    """
    translator = translator or Translator()
    email = (email or "").strip()

    if not email:
        return ProfileLookup(error=translator.t("guardian.profile.error.required"))

    try:
        guardian = client.guardian.get_by_email(email)
        progress = client.gamification.get_guardian_progress(email)
    except APIError as e:
        logger.warning(f"Guardian lookup failed for {email}: {e}")
        return ProfileLookup(error=translator.t("guardian.profile.error.notFound"))

    return ProfileLookup(guardian=guardian, progress=progress)


def load_community(
    client: WysycsAPIClient,
    limit: int = DEFAULT_LEADERBOARD_LIMIT,
) -> Tuple[Optional[Leaderboard], Optional[CommunityStats]]:
    """
    Fetch the leaderboard and global stats together.

    Both are returned or neither: a failure of either request is logged and
    yields (None, None).
    """
    with ThreadPoolExecutor(max_workers=2) as executor:
        leaderboard_future = executor.submit(client.gamification.get_leaderboard, limit)
        stats_future = executor.submit(client.gamification.get_global_stats)

        try:
            leaderboard = leaderboard_future.result()
            stats = stats_future.result()
        except APIError as e:
            logger.error(f"Error loading gamification data: {e}")
            return None, None

    return leaderboard, stats


def _same_email(a: Optional[str], b: Optional[str]) -> bool:
    return bool(a and b) and a.strip().lower() == b.strip().lower()


def leaderboard_rows(
    leaderboard: Leaderboard,
    translator: Optional[Translator] = None,
    current_email: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """
    Table rows for the leaderboard.

    The first place gets a crown and the row of the guardian whose profile is
    open is tagged with a "you" badge.
    """
    translator = translator or Translator()
    t = translator.t
    rows = []
    for entry in leaderboard.entries:
        rank = f"{TOP_RANK_BADGE} {entry.rank}" if entry.rank == 1 else str(entry.rank)
        name = entry.guardian_name
        if _same_email(entry.guardian_email, current_email):
            name = f"{name} ({t('guardian.leaderboard.you')})"
        rows.append({
            "#": rank,
            t("guardian.leaderboard.name"): name,
            t("guardian.leaderboard.level"): f"{entry.level_emoji or level_emoji(entry.guardian_level)} {entry.guardian_level}",
            t("guardian.leaderboard.points"): entry.total_points,
            t("guardian.leaderboard.forests"): entry.forests_count,
        })
    return rows
