"""Tests for rating_ledger.chart."""

from rating_ledger.account import Account
from rating_ledger.chart import TIER_COLOURS, make_rating_chart
from rating_ledger.game import Game, Result
from rating_ledger.tiers import Tier


def _accounts():
    a = Account("A", rating=12)
    b = Account("B", tier=Tier.PREMIUM, rating=3)
    c = Account("C", tier=Tier.PREMIUM_PLUS, rating=0)
    game = Game("m", a, b, 2)
    game.resolve(Result.WIN)
    a.complete_game(game)
    return [a, b, c]


def test_every_tier_has_a_colour():
    assert set(TIER_COLOURS) == set(Tier)


def test_chart_written(tmp_path):
    out = tmp_path / "board.png"
    path = make_rating_chart(_accounts(), output_path=str(out), baseline=5)
    assert path == str(out)
    assert out.exists()
    assert out.stat().st_size > 0


def test_chart_single_tier_all_zero(tmp_path):
    out = tmp_path / "zeros.png"
    make_rating_chart([Account("A", rating=0), Account("B", rating=0)], output_path=str(out))
    assert out.exists()


def test_chart_does_not_touch_accounts(tmp_path):
    accounts = _accounts()
    before = [(a.rating, a.games_count) for a in accounts]
    make_rating_chart(accounts, output_path=str(tmp_path / "c.png"))
    assert [(a.rating, a.games_count) for a in accounts] == before
