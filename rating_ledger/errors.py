"""Exception hierarchy for the rating ledger.

Each exception keeps the offending values as attributes so callers can
report them without parsing the message.
"""

from __future__ import annotations


class LedgerError(Exception):
    """Base class for every error raised by rating_ledger."""


class ParticipantMismatchError(LedgerError):
    """An account tried to complete a game it did not play in."""

    def __init__(self, account_name: str, game_id: int):
        self.account_name = account_name
        self.game_id = game_id
        super().__init__(
            f"{account_name!r} cannot complete game {game_id}: "
            "not a participant"
        )


class DoubleCompletionError(LedgerError):
    """A game's result was set a second time."""

    def __init__(self, game_id: int, result: object):
        self.game_id = game_id
        self.result = result
        super().__init__(f"Game {game_id} is already decided ({result})")


class UndeterminedResultError(LedgerError):
    """A game was completed before its result was decided."""

    def __init__(self, game_id: int):
        self.game_id = game_id
        super().__init__(f"Game {game_id} has no result yet")


class GameAlreadyBoundError(LedgerError):
    """Participants were bound to a game that already has them."""

    def __init__(self, game_id: int):
        self.game_id = game_id
        super().__init__(f"Game {game_id} already has participants")


class InvalidStakeError(LedgerError, ValueError):
    """Stake is negative, or non-zero on a no-stake game."""

    def __init__(self, stake: int, variant: object):
        self.stake = stake
        self.variant = variant
        super().__init__(f"Invalid stake {stake} for {variant} game")


class SelfPlayError(LedgerError, ValueError):
    """Both seats of a game were given to the same account."""

    def __init__(self, account_name: str, game_id: int):
        self.account_name = account_name
        self.game_id = game_id
        super().__init__(f"{account_name!r} cannot play both seats of game {game_id}")


class DuplicateGameIdError(LedgerError):
    """A different game with an already recorded id reached an account."""

    def __init__(self, account_name: str, game_id: int):
        self.account_name = account_name
        self.game_id = game_id
        super().__init__(
            f"{account_name!r} already recorded a different game with id {game_id}"
        )
