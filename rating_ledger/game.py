"""Games — a single match between two accounts and how its outcome is decided."""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import TYPE_CHECKING, Callable

from rating_ledger.errors import (
    DoubleCompletionError,
    GameAlreadyBoundError,
    InvalidStakeError,
    SelfPlayError,
)

if TYPE_CHECKING:
    from rating_ledger.account import Account

logger = logging.getLogger(__name__)


# ── Enums ────────────────────────────────────────────────────────────

class Result(str, Enum):
    """Outcome of a game, always stored from the first participant's side."""

    WIN = "Win"
    LOSE = "Lose"
    DRAW = "Draw"
    UNDETERMINED = "Undetermined"

    def inverted(self) -> Result:
        """The same outcome seen from the other seat."""
        if self is Result.WIN:
            return Result.LOSE
        if self is Result.LOSE:
            return Result.WIN
        return self


class Variant(str, Enum):
    """How the second participant's rating responds to the outcome."""

    SYMMETRIC = "symmetric"
    NO_STAKE = "no_stake"  # training game, stake is always 0
    ONE_SIDED = "one_sided"  # second participant's rating never moves


class Side(str, Enum):
    FIRST = "first"
    SECOND = "second"


# ── Id sequence ──────────────────────────────────────────────────────

class GameIdSequence:
    """Hands out strictly increasing game ids, starting at *start*."""

    def __init__(self, start: int = 0):
        self._start = start
        self._next = start

    def next_id(self) -> int:
        value = self._next
        self._next += 1
        return value

    def reset(self) -> None:
        self._next = self._start


# Process-wide default; tests inject their own.
GAME_IDS = GameIdSequence()


# ── Outcome policies ─────────────────────────────────────────────────

OutcomePolicy = Callable[[random.Random], Result]


def nested_draw_outcome(rng: random.Random) -> Result:
    """Draw half the time; otherwise a second coin decides Win or Lose."""
    if rng.random() < 0.5:
        return Result.DRAW
    return Result.WIN if rng.random() < 0.5 else Result.LOSE


def uniform_outcome(rng: random.Random) -> Result:
    """Win, Lose and Draw with equal probability."""
    return rng.choice([Result.WIN, Result.LOSE, Result.DRAW])


POLICIES: dict[str, OutcomePolicy] = {
    "nested": nested_draw_outcome,
    "uniform": uniform_outcome,
}


# ── Game ─────────────────────────────────────────────────────────────

class Game:
    """One match between two accounts.

    Built either with both participants and the stake up front, or with just
    a name, in which case ``bind`` (or ``simulate_play``) supplies them later.
    Participants, once bound, and the result, once decided, never change.
    """

    def __init__(
        self,
        name: str,
        first: Account | None = None,
        second: Account | None = None,
        stake: int | None = None,
        variant: Variant = Variant.SYMMETRIC,
        ids: GameIdSequence | None = None,
    ):
        self._id = (ids or GAME_IDS).next_id()
        self._name = name
        self._variant = variant
        self._first: Account | None = None
        self._second: Account | None = None
        self._stake = 0
        self._result = Result.UNDETERMINED

        if (first is None) != (second is None):
            raise ValueError("Game needs both participants or neither")
        if first is not None:
            self.bind(first, second, stake)
        elif stake is not None:
            self._stake = _check_stake(stake, variant)

    def __repr__(self) -> str:
        first = self._first.name if self._first else None
        second = self._second.name if self._second else None
        return (
            f"Game(id={self.id}, name={self.name!r}, first={first!r}, "
            f"second={second!r}, stake={self._stake}, "
            f"variant={self.variant.value}, result={self._result.value})"
        )

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def variant(self) -> Variant:
        return self._variant

    @property
    def first(self) -> Account | None:
        return self._first

    @property
    def second(self) -> Account | None:
        return self._second

    @property
    def stake(self) -> int:
        return self._stake

    @property
    def result(self) -> Result:
        return self._result

    @property
    def is_bound(self) -> bool:
        return self._first is not None

    @property
    def is_decided(self) -> bool:
        return self._result is not Result.UNDETERMINED

    def bind(self, first: Account, second: Account, stake: int | None = None) -> None:
        """Seat two distinct accounts. Stake may be omitted only for NO_STAKE games."""
        if self.is_bound:
            raise GameAlreadyBoundError(self.id)
        if first is second or first.name == second.name:
            raise SelfPlayError(first.name, self.id)
        if stake is None:
            if self.variant is not Variant.NO_STAKE:
                raise ValueError(f"Game {self.id} ({self.variant.value}) needs a stake")
            stake = 0
        self._stake = _check_stake(stake, self.variant)
        self._first = first
        self._second = second

    def resolve(self, result: Result) -> None:
        """Set the result. Allowed exactly once."""
        if result is Result.UNDETERMINED:
            raise ValueError("A game cannot be resolved to Undetermined")
        if self.is_decided:
            raise DoubleCompletionError(self.id, self._result)
        self._result = result
        logger.debug("Game %d (%s) resolved: %s", self.id, self.name, result.value)

    # ── perspective ──────────────────────────────────────────────────

    def side_of(self, account: Account) -> Side | None:
        """Which seat *account* occupies, matched by name."""
        if self._first is not None and self._first.name == account.name:
            return Side.FIRST
        if self._second is not None and self._second.name == account.name:
            return Side.SECOND
        return None

    def opponent_of(self, account: Account) -> Account | None:
        side = self.side_of(account)
        if side is Side.FIRST:
            return self._second
        if side is Side.SECOND:
            return self._first
        return None

    def result_for(self, account: Account) -> Result:
        """The result as *account* experienced it."""
        if self.side_of(account) is Side.SECOND:
            return self._result.inverted()
        return self._result

    def delta_for(self, side: Side) -> int:
        """Signed rating change this game implies for *side*, before tier rules."""
        if self._result is Result.WIN:
            first_delta = self._stake
        elif self._result is Result.LOSE:
            first_delta = -self._stake
        else:
            first_delta = 0

        if side is Side.FIRST:
            return first_delta
        if self.variant is Variant.ONE_SIDED:
            return 0
        return -first_delta

    # ── playing ──────────────────────────────────────────────────────

    def play(self) -> None:
        """Interactive play; reserved, not implemented."""
        raise NotImplementedError("Interactive play is not available")

    def simulate_play(
        self,
        first: Account | None = None,
        second: Account | None = None,
        stake: int | None = None,
        *,
        policy: OutcomePolicy | None = None,
        rng: random.Random | None = None,
    ) -> Result:
        """Decide a random result and settle it into both accounts.

        Participants (and stake) may be passed here when the game was built
        from a name only. Returns the result from the first seat's view.
        """
        if first is not None or second is not None:
            if first is None or second is None:
                raise ValueError("simulate_play needs both participants or neither")
            self.bind(first, second, stake)
        elif not self.is_bound:
            raise ValueError(f"Game {self.id} has no participants to play")

        policy = policy or nested_draw_outcome
        rng = rng or random.Random()
        self.resolve(policy(rng))
        self._first.complete_game(self)
        return self._result


def _check_stake(stake: int, variant: Variant) -> int:
    if stake < 0 or (variant is Variant.NO_STAKE and stake != 0):
        raise InvalidStakeError(stake, variant)
    return stake
