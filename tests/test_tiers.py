"""Tests for rating_ledger.tiers."""

from rating_ledger.tiers import (
    Tier,
    apply_rating_change,
    premium_plus_rating,
    premium_rating,
    standard_rating,
)


# ── standard ─────────────────────────────────────────────────────────

def test_standard_adds_delta():
    assert standard_rating(10, 4, 2) == 14
    assert standard_rating(10, -4, 2) == 6


def test_standard_floors_at_zero():
    assert standard_rating(3, -10, 2) == 0


# ── premium ──────────────────────────────────────────────────────────

def test_premium_halves_loss():
    """10 - (10 - 4) // 2 = 7."""
    assert premium_rating(10, -6, 2) == 7


def test_premium_gain_in_full():
    assert premium_rating(10, 4, 2) == 14


def test_premium_loss_truncates():
    assert premium_rating(5, -5, 2) == 3  # 5 - 5 // 2


def test_premium_custom_multiplier():
    assert premium_rating(10, -9, 3) == 7


def test_premium_floors_at_zero():
    assert premium_rating(2, -20, 2) == 0


# ── premium plus ─────────────────────────────────────────────────────

def test_premium_plus_doubles_gain():
    """10 + (14 - 10) * 2 = 18."""
    assert premium_plus_rating(10, 4, 2) == 18


def test_premium_plus_softens_loss_like_premium():
    assert premium_plus_rating(10, -6, 2) == 7


def test_zero_delta_is_noop_for_every_tier():
    for tier in Tier:
        assert apply_rating_change(tier, 8, 0, 2) == 8


# ── dispatch ─────────────────────────────────────────────────────────

def test_apply_rating_change_dispatches_by_tier():
    assert apply_rating_change(Tier.STANDARD, 10, -6) == 4
    assert apply_rating_change(Tier.PREMIUM, 10, -6) == 7
    assert apply_rating_change(Tier.PREMIUM_PLUS, 10, 4) == 18


def test_never_negative():
    for tier in Tier:
        for current in range(0, 6):
            for delta in range(-12, 13, 3):
                assert apply_rating_change(tier, current, delta, 2) >= 0
