import logging
import re

from scoreboard.models import (
    PlayerScore,
    SCORE_KEY_PATTERN,
    score_key,
    username_from_score_key,
)
from scoreboard.store import StoreError

logger = logging.getLogger(__name__)

# The only form INCR ever writes
INTEGER_VALUE = re.compile(r'-?[0-9]+')


def ensure_player(store, username: str) -> bool:
    """Create the score record at 0 unless it already exists.

    Returns True when a new record was created.
    """
    key = score_key(username)
    if store.get(key) is not None:
        return False
    store.set(key, 0)
    return True


def increment_score(store, username: str) -> int:
    # INCR treats a missing key as 0
    return store.incr(score_key(username))


def leaderboard(store) -> list[PlayerScore]:
    """Every player's current score, in key enumeration order.

    Entries that cannot be read as an integer are skipped; only a failure
    to list the keys propagates.
    """
    players = []
    for key in store.keys(SCORE_KEY_PATTERN):
        try:
            raw = store.get(key)
        except StoreError as exc:
            logger.debug(f"[leaderboard] skipping {key}: {exc}")
            continue
        if raw is None:
            continue
        if not INTEGER_VALUE.fullmatch(raw):
            logger.debug(f"[leaderboard] skipping {key}: non-integer value {raw!r}")
            continue
        score = int(raw)
        players.append(PlayerScore(username=username_from_score_key(key), score=score))
    return players
