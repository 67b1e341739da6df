"""Tests for ranking players by time played."""

import pytest

from linechange.models import GameState, SessionClock
from linechange.services import RankingService, TimerService

from fakes import FakeClock


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def state():
    return GameState(clock=SessionClock(cap_ms=10_000))


@pytest.fixture()
def timer(state, clock):
    service = TimerService(state, clock=clock)
    service.load_roster(["Ann", "Ben", "Cal", "Dee"])
    return service


@pytest.fixture()
def ranking(state, clock):
    return RankingService(state, clock=clock)


def test_rank_orders_by_total_including_in_flight_time(timer, ranking, clock):
    timer.start_game()
    timer.toggle_player(2)  # Cal on at 0
    clock.set(1000)
    timer.toggle_player(1)  # Ben on at 1000
    clock.set(1500)
    timer.toggle_player(2)  # Cal off with 1500 banked
    clock.set(4000)

    ranked = ranking.rank()
    assert [s.name for s in ranked] == ["Ben", "Cal", "Ann", "Dee"]
    assert [s.total_ms for s in ranked] == [3000, 1500, 0, 0]
    assert [s.place for s in ranked] == [1, 2, 3, 4]

    ben = ranked[0]
    assert ben.is_active and ben.accumulating
    assert ben.current_interval_ms == 3000


def test_ties_keep_roster_order(timer, ranking, clock):
    timer.toggle_player(3)
    timer.toggle_player(1)
    timer.start_game()
    clock.set(2000)

    ranked = ranking.rank()
    assert [s.name for s in ranked] == ["Ben", "Dee", "Ann", "Cal"]


def test_rank_never_mutates_state(timer, ranking, state, clock):
    timer.toggle_player(0)
    timer.start_game()
    clock.set(2500)
    before = [(p.to_dict(), p.session_started_at) for p in state.roster]
    order = [p.id for p in state.roster]

    for step in range(200):
        ranking.rank(2500 + step)

    assert [(p.to_dict(), p.session_started_at) for p in state.roster] == before
    assert [p.id for p in state.roster] == order
    assert state.clock.resumed_at == 0


def test_rank_clamps_totals_to_cap(timer, ranking, clock):
    timer.toggle_player(0)
    timer.start_game()
    ranked = ranking.rank(25_000)
    assert ranked[0].total_ms == 10_000


def test_paused_session_shows_banked_time_only(timer, ranking, clock):
    timer.toggle_player(0)
    timer.start_game()
    clock.set(3000)
    timer.pause_game()

    standing = ranking.rank(9000)[0]
    assert standing.total_ms == 3000
    assert standing.is_active
    assert not standing.accumulating
    assert standing.current_interval_ms == 0


def test_snapshot_samples_everything_at_one_instant(timer, ranking, state, clock):
    timer.toggle_player(1)
    timer.start_game()
    timer.increment_score("away")
    clock.set(4000)

    snapshot = ranking.snapshot()
    assert snapshot.generated_ts == 4000
    assert snapshot.clock_state == "running"
    assert snapshot.running
    assert snapshot.elapsed_ms == 4000
    assert snapshot.remaining_ms == 6000
    assert snapshot.cap_ms == 10_000
    assert (snapshot.home_score, snapshot.away_score) == (0, 1)
    assert [s.name for s in snapshot.roster] == ["Ann", "Ben", "Cal", "Dee"]
    assert snapshot.standings[0].name == "Ben"
    assert snapshot.roster[1].place == 1


def test_empty_roster(state, ranking):
    assert ranking.rank(0) == []
    assert ranking.snapshot(0).standings == []
