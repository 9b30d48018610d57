"""Accounts — rating, game history, and the completion protocol."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from rating_ledger.errors import (
    DuplicateGameIdError,
    ParticipantMismatchError,
    UndeterminedResultError,
)
from rating_ledger.game import Game, Result, Side
from rating_ledger.tiers import DEFAULT_MULTIPLIER, Tier, apply_rating_change

logger = logging.getLogger(__name__)

DEFAULT_RATING = 5


# ── Read-only views ──────────────────────────────────────────────────

@dataclass(frozen=True)
class HistoryEntry:
    """A completed game as one account saw it."""

    game: Game
    side: Side
    result: Result  # already flipped for the second seat


@dataclass(frozen=True)
class AccountStats:
    name: str
    tier: Tier
    rating: int
    games_count: int
    entries: tuple[HistoryEntry, ...]


# ── Account ──────────────────────────────────────────────────────────

class Account:
    """A rated player.

    The rating only changes through ``complete_game``; every accessor here
    is read-only.
    """

    def __init__(
        self,
        name: str,
        tier: Tier = Tier.STANDARD,
        multiplier: int = DEFAULT_MULTIPLIER,
        rating: int = DEFAULT_RATING,
    ):
        if multiplier < 1:
            raise ValueError(f"multiplier must be a positive integer, got {multiplier}")
        if rating < 0:
            raise ValueError(f"rating cannot be negative, got {rating}")
        self._name = name
        self._tier = tier
        self._multiplier = multiplier
        self._rating = rating
        self._history: list[Game] = []
        self._recorded: dict[int, Game] = {}

    def __repr__(self) -> str:
        return (
            f"Account(name={self._name!r}, tier={self._tier.value}, "
            f"rating={self._rating}, games={len(self._history)})"
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def tier(self) -> Tier:
        return self._tier

    @property
    def multiplier(self) -> int:
        return self._multiplier

    @property
    def rating(self) -> int:
        return self._rating

    @property
    def history(self) -> tuple[Game, ...]:
        return tuple(self._history)

    @property
    def games_count(self) -> int:
        return len(self._history)

    def entries(self) -> tuple[HistoryEntry, ...]:
        """History in recording order, with each result from this account's side."""
        return tuple(
            HistoryEntry(game=g, side=g.side_of(self), result=g.result_for(self))
            for g in self._history
        )

    def stats(self) -> AccountStats:
        return AccountStats(
            name=self.name,
            tier=self.tier,
            rating=self._rating,
            games_count=len(self._history),
            entries=self.entries(),
        )

    # ── completion protocol ──────────────────────────────────────────

    def complete_game(self, game: Game) -> None:
        """Settle a decided game into this account and its opponent.

        Raises ParticipantMismatchError if this account did not play,
        UndeterminedResultError if the game has no result yet, and
        DuplicateGameIdError if either side already holds a different game
        under the same id. Neither account is touched in those cases.
        """
        opponent = game.opponent_of(self)
        if opponent is None:
            raise ParticipantMismatchError(self.name, game.id)
        if not game.is_decided:
            raise UndeterminedResultError(game.id)
        self._check_game_id(game)
        opponent._check_game_id(game)

        self.record_game(game)
        opponent.record_game(game)

    def record_game(self, game: Game) -> None:
        """Apply *game* to this account once; later calls are no-ops."""
        if self._is_recorded(game):
            logger.debug("%s already recorded game %d, skipping", self.name, game.id)
            return

        side = game.side_of(self)
        if side is None:
            raise ParticipantMismatchError(self.name, game.id)
        if not game.is_decided:
            raise UndeterminedResultError(game.id)

        old = self._rating
        self._rating = apply_rating_change(
            self.tier, old, game.delta_for(side), self.multiplier,
        )
        self._history.append(game)
        self._recorded[game.id] = game
        logger.debug(
            "%s recorded game %d as %s seat: %d -> %d",
            self.name, game.id, side.value, old, self._rating,
        )

    def _is_recorded(self, game: Game) -> bool:
        self._check_game_id(game)
        return game.id in self._recorded

    def _check_game_id(self, game: Game) -> None:
        held = self._recorded.get(game.id)
        if held is not None and held is not game:
            raise DuplicateGameIdError(self.name, game.id)
