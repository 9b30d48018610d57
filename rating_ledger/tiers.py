"""Account tiers and their rating update rules.

Every rule is a pure function of the current rating, the signed change the
game implies, and the account's multiplier:

  STANDARD      new = current + delta
  PREMIUM       losses are divided by the multiplier
  PREMIUM_PLUS  losses divided, gains multiplied

The result is floored at 0.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

DEFAULT_MULTIPLIER = 2


class Tier(str, Enum):
    STANDARD = "standard"
    PREMIUM = "premium"
    PREMIUM_PLUS = "premium_plus"


def standard_rating(current: int, delta: int, multiplier: int) -> int:
    return max(0, current + delta)


def premium_rating(current: int, delta: int, multiplier: int) -> int:
    naive = current + delta
    if naive < current:
        naive = current - (current - naive) // multiplier
    return max(0, naive)


def premium_plus_rating(current: int, delta: int, multiplier: int) -> int:
    naive = current + delta
    if naive > current:
        return current + (naive - current) * multiplier
    return premium_rating(current, delta, multiplier)


_STRATEGIES: dict[Tier, Callable[[int, int, int], int]] = {
    Tier.STANDARD: standard_rating,
    Tier.PREMIUM: premium_rating,
    Tier.PREMIUM_PLUS: premium_plus_rating,
}


def apply_rating_change(
    tier: Tier,
    current: int,
    delta: int,
    multiplier: int = DEFAULT_MULTIPLIER,
) -> int:
    """Return the new rating for an account of *tier* after a change of *delta*."""
    return _STRATEGIES[tier](current, delta, multiplier)
