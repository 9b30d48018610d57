"""Rating chart: one bar per account, grouped and coloured by tier."""

from __future__ import annotations

from typing import Sequence

import matplotlib
matplotlib.use("Agg")  # non-interactive backend

import matplotlib.pyplot as plt
from matplotlib.patches import Patch

from rating_ledger.account import Account
from rating_ledger.tiers import Tier

TIER_COLOURS: dict[Tier, str] = {
    Tier.STANDARD: "#8C9BAB",
    Tier.PREMIUM: "#4A90D9",
    Tier.PREMIUM_PLUS: "#D9A441",
}


def make_rating_chart(
    accounts: Sequence[Account],
    output_path: str = "rating_leaderboard.png",
    title: str = "Ratings by Tier",
    baseline: int | None = None,
) -> str:
    """Draw each account's rating, tiers side by side, best first within a tier.

    Bars are labelled with the rating and games played. *baseline*, when
    given, is drawn as a dashed line (typically the starting rating).
    Returns the path to the saved PNG.
    """
    tier_order = list(Tier)
    ordered = sorted(
        accounts,
        key=lambda a: (tier_order.index(a.tier), -a.rating, a.name),
    )

    fig, ax = plt.subplots(figsize=(max(6, len(ordered) * 1.2), 5))
    positions = range(len(ordered))
    bars = ax.bar(
        positions,
        [a.rating for a in ordered],
        color=[TIER_COLOURS[a.tier] for a in ordered],
        edgecolor="black",
        linewidth=0.5,
    )
    ax.bar_label(
        bars,
        labels=[f"{a.rating}\n{a.games_count} games" for a in ordered],
        padding=2,
        fontsize=9,
    )
    ax.set_xticks(list(positions))
    ax.set_xticklabels([a.name for a in ordered])

    if baseline is not None:
        ax.axhline(baseline, linestyle="--", color="grey", linewidth=1)

    present = [t for t in tier_order if any(a.tier is t for a in ordered)]
    ax.legend(
        handles=[Patch(color=TIER_COLOURS[t], label=t.value) for t in present],
        title="Tier",
        loc="upper right",
    )

    top = max((a.rating for a in ordered), default=0)
    ax.set_ylim(bottom=0, top=top * 1.3 + 2)
    ax.set_ylabel("Rating")
    ax.set_title(title, fontsize=14, fontweight="bold")

    fig.tight_layout()
    fig.savefig(output_path, dpi=120)
    plt.close(fig)
    return output_path
