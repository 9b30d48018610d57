"""CLI entry point: python -m rating_ledger {simulate,chart}."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from dataclasses import dataclass

from rating_ledger.account import DEFAULT_RATING, Account
from rating_ledger.chart import make_rating_chart
from rating_ledger.errors import LedgerError
from rating_ledger.game import POLICIES, Game, GameIdSequence, Variant
from rating_ledger.history import format_leaderboard, format_stats
from rating_ledger.tiers import DEFAULT_MULTIPLIER, Tier

DEFAULT_GAMES = 20
DEFAULT_STAKE = 3


# ── Roster ───────────────────────────────────────────────────────────

@dataclass
class AccountSpec:
    """How to create one account of the default roster."""

    name: str
    tier: Tier
    multiplier: int = DEFAULT_MULTIPLIER

    def make_account(self, rating: int = DEFAULT_RATING) -> Account:
        return Account(self.name, tier=self.tier, multiplier=self.multiplier, rating=rating)


ROSTER: list[AccountSpec] = [
    AccountSpec("Alice", Tier.STANDARD),
    AccountSpec("Bob", Tier.STANDARD),
    AccountSpec("Carol", Tier.PREMIUM),
    AccountSpec("Dave", Tier.PREMIUM, multiplier=3),
    AccountSpec("Erin", Tier.PREMIUM_PLUS),
]


# ── season ───────────────────────────────────────────────────────────

def run_season(
    accounts: list[Account],
    games: int,
    stake: int,
    rng: random.Random,
    policy_name: str = "nested",
    ids: GameIdSequence | None = None,
) -> list[Game]:
    """Play *games* random games between random pairs of *accounts*.

    Game ids come from *ids*, or the process-wide sequence when omitted.
    """
    if len(accounts) < 2:
        raise ValueError("A season needs at least two accounts")
    if stake < 0:
        raise ValueError(f"stake cannot be negative, got {stake}")

    policy = POLICIES[policy_name]
    played: list[Game] = []
    for i in range(games):
        first, second = rng.sample(accounts, 2)
        variant = rng.choice(list(Variant))
        game = Game(f"{variant.value} #{i + 1}", variant=variant, ids=ids)
        game_stake = 0 if variant is Variant.NO_STAKE else stake
        game.simulate_play(first, second, game_stake, policy=policy, rng=rng)
        played.append(game)
    return played


def _season_from_args(args: argparse.Namespace) -> list[Account]:
    accounts = [spec.make_account(rating=args.rating) for spec in ROSTER]
    rng = random.Random(args.seed)
    run_season(accounts, args.games, args.stake, rng, args.policy)
    return accounts


# ── simulate ─────────────────────────────────────────────────────────

def cmd_simulate(args: argparse.Namespace) -> None:
    """Play a random season and print the results."""
    accounts = _season_from_args(args)

    if args.history:
        for account in accounts:
            print(format_stats(account.stats()))
    print(format_leaderboard(accounts))


# ── chart ────────────────────────────────────────────────────────────

def cmd_chart(args: argparse.Namespace) -> None:
    """Play a random season and save a leaderboard chart."""
    accounts = _season_from_args(args)
    out = args.output or "rating_leaderboard.png"
    make_rating_chart(accounts, output_path=out, baseline=args.rating)
    print(f"Chart saved to {out}")


# ── main ─────────────────────────────────────────────────────────────

def _add_season_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--games", type=int, default=DEFAULT_GAMES, help=f"Games to play (default {DEFAULT_GAMES})")
    p.add_argument("--stake", type=int, default=DEFAULT_STAKE, help=f"Stake per rated game (default {DEFAULT_STAKE})")
    p.add_argument("--rating", type=int, default=DEFAULT_RATING, help="Starting rating for every account")
    p.add_argument("--seed", type=int, help="Random seed for a reproducible season")
    p.add_argument("--policy", choices=sorted(POLICIES), default="nested", help="Outcome policy")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="rating_ledger",
        description="Tiered rating ledger simulator",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log every recorded game")
    sub = parser.add_subparsers(dest="command")

    p_sim = sub.add_parser("simulate", help="Play a random season and print ratings")
    _add_season_args(p_sim)
    p_sim.add_argument("--history", action="store_true", help="Print each account's game history")

    p_chart = sub.add_parser("chart", help="Play a random season and save a leaderboard chart")
    _add_season_args(p_chart)
    p_chart.add_argument("--output", "-o", help="Output PNG path")

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        if args.command == "simulate":
            cmd_simulate(args)
        elif args.command == "chart":
            cmd_chart(args)
        else:
            parser.print_help()
    except (LedgerError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
