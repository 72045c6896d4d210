"""Tests for round-robin fixture generation."""
from collections import Counter
from datetime import date

import pytest

from league_manager.engine import (
    WEEKDAYS,
    generate_fixtures,
    match_dates,
    round_robin_rounds,
)


TODAY = date(2026, 1, 10)


def _generate(teams, ruleset="round-robin", **overrides):
    kwargs = {
        "start_month": 0,
        "end_month": 11,
        "match_days": ["Saturday"],
        "match_times": ["15:00", "17:00"],
        "ruleset": ruleset,
        "today": TODAY,
    }
    kwargs.update(overrides)
    return generate_fixtures(teams, **kwargs)


def _teams(n):
    return [f"Team {i}" for i in range(1, n + 1)]


# ── Pairings ─────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("n", [2, 4, 6, 8, 10])
def test_even_single_round_robin_covers_every_pair_once(n):
    fixtures, error = _generate(_teams(n))
    assert error is None
    assert len(fixtures) == n * (n - 1) // 2

    pairs = Counter(frozenset((f.home_team, f.away_team)) for f in fixtures)
    assert len(pairs) == n * (n - 1) // 2
    assert set(pairs.values()) == {1}


@pytest.mark.parametrize("n", [3, 5, 7, 9])
def test_odd_single_round_robin_covers_every_pair_once(n):
    fixtures, error = _generate(_teams(n))
    assert error is None
    assert len(fixtures) == n * (n - 1) // 2

    pairs = Counter(frozenset((f.home_team, f.away_team)) for f in fixtures)
    assert set(pairs.values()) == {1}
    assert all(f.home_team != f.away_team for f in fixtures)


def test_five_teams_each_sit_out_exactly_one_round():
    teams = _teams(5)
    rounds = round_robin_rounds(teams)
    # padded to six slots, so five rounds of two matches
    assert len(rounds) == 5
    assert all(len(round_pairs) == 2 for round_pairs in rounds)

    idle = Counter()
    for round_pairs in rounds:
        busy = {t for _, home, away in round_pairs for t in (home, away)}
        idle.update(team for team in teams if team not in busy)
    assert idle == Counter({team: 1 for team in teams})


@pytest.mark.parametrize("n", [3, 7, 9])
def test_odd_count_every_team_has_exactly_one_bye_round(n):
    teams = _teams(n)
    rounds = round_robin_rounds(teams)
    assert len(rounds) == n

    idle = Counter()
    for round_pairs in rounds:
        busy = {t for _, home, away in round_pairs for t in (home, away)}
        idle.update(team for team in teams if team not in busy)
    assert idle == Counter({team: 1 for team in teams})


def test_rotation_keeps_first_team_fixed_at_home():
    rounds = round_robin_rounds(["A", "B", "C", "D"])
    assert [r[0][1] for r in rounds] == ["A", "A", "A"]
    assert rounds[0] == [(0, "A", "D"), (1, "B", "C")]
    # last team moves to index 1: [A, D, B, C]
    assert rounds[1] == [(0, "A", "C"), (1, "D", "B")]
    assert rounds[2] == [(0, "A", "B"), (1, "C", "D")]


def test_bye_pairings_are_skipped_but_keep_slot_index():
    fixtures, _ = _generate(["A", "B", "C"])
    # Padded to [A, B, C, BYE]: round 0 pairs A-BYE (skipped) then B-C
    assert fixtures[0].id == "0-1"
    assert (fixtures[0].home_team, fixtures[0].away_team) == ("B", "C")


# ── Double round-robin ───────────────────────────────────────────────────────

@pytest.mark.parametrize("n", [2, 4, 5, 6])
def test_double_round_robin_plays_each_pair_home_and_away(n):
    single, _ = _generate(_teams(n))
    double, error = _generate(_teams(n), ruleset="double-round-robin")
    assert error is None
    assert len(double) == 2 * len(single)

    directed = Counter((f.home_team, f.away_team) for f in double)
    assert set(directed.values()) == {1}
    for home, away in directed:
        assert (away, home) in directed


def test_return_legs_follow_first_pass_with_derived_ids():
    fixtures, _ = _generate(["A", "B", "C", "D"], ruleset="double-round-robin")
    first, second = fixtures[:6], fixtures[6:]

    assert [f.id for f in second] == [f"return-{f.id}" for f in first]
    for leg, ret in zip(first, second):
        assert (ret.home_team, ret.away_team) == (leg.away_team, leg.home_team)

    # Return legs continue the slot cursor rather than reusing first-leg slots
    assert (second[0].date, second[0].time) > (first[-1].date, first[-1].time)


# ── Slots ────────────────────────────────────────────────────────────────────

def test_times_cycle_before_dates_advance():
    fixtures, _ = _generate(_teams(4))
    saturdays = [d.isoformat() for d in match_dates(0, 11, ["Saturday"], today=TODAY)]

    slots = [(f.date, f.time) for f in fixtures]
    assert slots[:4] == [
        (saturdays[0], "15:00"),
        (saturdays[0], "17:00"),
        (saturdays[1], "15:00"),
        (saturdays[1], "17:00"),
    ]


def test_generated_fixtures_start_unplayed():
    fixtures, _ = _generate(_teams(6), ruleset="double-round-robin")
    assert all(not f.played for f in fixtures)
    assert all(f.home_score == 0 and f.away_score == 0 for f in fixtures)
    assert all(f.details is None for f in fixtures)


def test_slots_wrap_when_pairings_exceed_dates():
    # January 2026 has 5 Saturdays, one time → 5 slots for 45 fixtures
    fixtures, error = _generate(
        _teams(10), start_month=0, end_month=0, match_times=["15:00"]
    )
    assert error is None
    assert len(fixtures) == 45
    dates = [f.date for f in fixtures]
    assert len(set(dates)) == 5
    assert dates[5] == dates[0]


def test_fixture_ids_are_unique():
    fixtures, _ = _generate(_teams(7), ruleset="double-round-robin")
    ids = [f.id for f in fixtures]
    assert len(ids) == len(set(ids))


# ── Match dates ──────────────────────────────────────────────────────────────

def test_match_dates_only_allowed_weekdays_in_window():
    dates = match_dates(2, 3, ["Tuesday", "Friday"], today=TODAY)
    assert dates[0] >= date(2026, 3, 1)
    assert dates[-1] <= date(2026, 4, 30)
    assert {WEEKDAYS[d.weekday()] for d in dates} == {"Tuesday", "Friday"}
    assert dates == sorted(dates)


def test_match_dates_include_last_day_of_end_month():
    # 31 January 2026 is a Saturday
    dates = match_dates(0, 0, ["Saturday"], today=TODAY)
    assert dates[-1] == date(2026, 1, 31)
    assert dates[0] == date(2026, 1, 3)


def test_match_dates_wrap_into_following_year():
    dates = match_dates(10, 1, ["Sunday"], today=TODAY)
    assert dates[0] == date(2026, 11, 1)
    assert dates[-1] == date(2027, 2, 28)
    assert all(d.month in (11, 12, 1, 2) for d in dates)


# ── Errors ───────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("ruleset", ["single-elimination", "double-elimination"])
def test_elimination_rulesets_not_implemented(ruleset):
    fixtures, error = _generate(_teams(4), ruleset=ruleset)
    assert fixtures is None
    assert "not yet implemented" in error
    assert ruleset in error


def test_unknown_ruleset():
    fixtures, error = _generate(_teams(4), ruleset="swiss")
    assert fixtures is None
    assert "Unknown fixture ruleset" in error


def test_requires_two_teams():
    fixtures, error = _generate(["Solo"])
    assert fixtures is None
    assert "At least 2 teams" in error


def test_requires_match_day_and_time():
    _, error = _generate(_teams(4), match_days=[])
    assert "match day" in error
    _, error = _generate(_teams(4), match_times=[])
    assert "match time" in error


def test_rejects_out_of_range_month():
    _, error = _generate(_teams(4), start_month=12)
    assert "between 0 and 11" in error


def test_rejects_unknown_weekday():
    _, error = _generate(_teams(4), match_days=["Caturday"])
    assert "Unknown match day" in error


def test_does_not_mutate_team_list():
    teams = _teams(5)
    _generate(teams, ruleset="double-round-robin")
    assert teams == _teams(5)
