import re

from league_manager.engine.records import PenaltyType, PlayerStats, TeamStanding


_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def parse_int(value):
    """Coerce user-entered numbers: leading integer of the text, else 0."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if value is None:
        return 0
    match = _LEADING_INT_RE.match(str(value))
    return int(match.group(1)) if match else 0


def sort_standings(standings):
    """Sort rows by points, then goal difference, then goals for, all DESC.

    The sort is stable, so rows tied on all three keep the order they came
    in (roster order when called from compute_standings).
    """
    return sorted(
        standings,
        key=lambda s: (s.points, s.goal_difference, s.goals_for),
        reverse=True,
    )


def _record_result(row, scored, conceded):
    row.played += 1
    row.goals_for += scored
    row.goals_against += conceded
    if scored > conceded:
        row.won += 1
        row.points += 3
    elif scored == conceded:
        row.drawn += 1
        row.points += 1
    else:
        row.lost += 1


def compute_standings(teams, fixtures):
    """Build the league table from played fixtures.

    Every team on the roster gets a row, even with nothing played. A fixture
    side naming a team that is not on the roster is skipped; the other side
    still counts.
    """
    table = {}
    for name in teams:
        if name not in table:
            table[name] = TeamStanding(team=name)

    for fixture in fixtures:
        if not fixture.played:
            continue

        home = table.get(fixture.home_team)
        if home is not None:
            _record_result(home, fixture.home_score, fixture.away_score)

        away = table.get(fixture.away_team)
        if away is not None:
            _record_result(away, fixture.away_score, fixture.home_score)

    for row in table.values():
        row.goal_difference = row.goals_for - row.goals_against

    return sort_standings(table.values())


def compute_player_stats(fixtures):
    """Aggregate goals, own goals and discipline per player name.

    Players are keyed by name only, so two players sharing a name share a
    line. Own goals are credited to the scorer's own-goal tally and leave the
    fixture score as recorded.
    """
    stats = {}

    for fixture in fixtures:
        if not fixture.played or fixture.details is None:
            continue

        details = fixture.details
        for goal in list(details.home_goals) + list(details.away_goals):
            line = stats.setdefault(goal.player, PlayerStats())
            if goal.is_own_goal:
                line.own_goals += 1
            else:
                line.goals += 1

        for penalty in details.penalties:
            line = stats.setdefault(penalty.player, PlayerStats())
            if penalty.type == PenaltyType.SIN_BIN:
                line.sin_bins += 1
            elif penalty.type == PenaltyType.RED_CARD:
                line.red_cards += 1

    return stats
