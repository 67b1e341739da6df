"""Tests for the home/away score counters."""

import pytest

from linechange.models import ScorePair, Side


def test_increment_and_decrement_each_side_independently():
    score = ScorePair()
    assert score.increment("home") == 1
    assert score.increment("home") == 2
    assert score.increment(Side.AWAY) == 1
    assert score.decrement("home") == 1
    assert score.to_dict() == {"home": 1, "away": 1}


def test_decrement_stops_at_zero():
    score = ScorePair()
    assert score.decrement("away") == 0
    assert score.away == 0


def test_side_names_are_case_insensitive():
    score = ScorePair()
    score.increment(" HOME ")
    assert score.home == 1


def test_unknown_side_raises():
    with pytest.raises(ValueError):
        ScorePair().increment("visitors")


def test_reset_and_from_dict():
    score = ScorePair.from_dict({"home": 3, "away": -2})
    assert (score.home, score.away) == (3, 0)
    score.reset()
    assert (score.home, score.away) == (0, 0)
    assert ScorePair.from_dict(None) == ScorePair()
