"""Plain-text rendering of account histories and leaderboards."""

from __future__ import annotations

from typing import Iterable, Sequence

from rating_ledger.account import Account, AccountStats, HistoryEntry

_HEADERS = ("Index", "Game Name", "First Player", "Second Player", "Result", "Wager")


def format_history(entries: Sequence[HistoryEntry]) -> str:
    """Render *entries* as a table, one row per game.

    The Result column shows each game from the viewing account's side.
    """
    if not entries:
        return "No games played yet.\n"

    rows = [
        (
            str(e.game.id),
            e.game.name,
            e.game.first.name,
            e.game.second.name,
            e.result.value,
            str(e.game.stake),
        )
        for e in entries
    ]
    widths = [
        max(len(h), *(len(r[i]) for r in rows))
        for i, h in enumerate(_HEADERS)
    ]

    def line(cells: Sequence[str]) -> str:
        return " | ".join(c.ljust(w) for c, w in zip(cells, widths)).rstrip() + "\n"

    out = [line(_HEADERS), "-+-".join("-" * w for w in widths) + "\n"]
    out.extend(line(r) for r in rows)
    return "".join(out)


def format_stats(stats: AccountStats) -> str:
    """History table followed by the account's current rating."""
    return f"{format_history(stats.entries)}{stats.name}'s rating: {stats.rating}\n"


def format_leaderboard(accounts: Iterable[Account]) -> str:
    ranked = sorted(accounts, key=lambda a: a.rating, reverse=True)
    lines = ["Ratings", "=" * 40]
    for a in ranked:
        lines.append(f"  {a.name:20s} {a.tier.value:13s} {a.rating:5d}")
    return "\n".join(lines) + "\n"
