import calendar
import enum
from datetime import date, timedelta

from league_manager.engine.records import FixtureRecord


WEEKDAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


class FixtureRuleset(enum.Enum):
    ROUND_ROBIN = "round-robin"
    DOUBLE_ROUND_ROBIN = "double-round-robin"
    SINGLE_ELIMINATION = "single-elimination"
    DOUBLE_ELIMINATION = "double-elimination"


_UNSUPPORTED_RULESETS = {
    FixtureRuleset.SINGLE_ELIMINATION,
    FixtureRuleset.DOUBLE_ELIMINATION,
}


# ── Match dates ──────────────────────────────────────────────────────────────

def match_dates(start_month, end_month, match_days, today=None):
    """Every date in the season window whose weekday is in ``match_days``.

    Months are 0-based (0 = January). The window opens on the first day of
    ``start_month`` in the reference year and closes on the last day of
    ``end_month``; when ``end_month < start_month`` the window runs into the
    following year.
    """
    today = today or date.today()
    start = date(today.year, start_month + 1, 1)

    end_year = today.year + 1 if end_month < start_month else today.year
    last_day = calendar.monthrange(end_year, end_month + 1)[1]
    end = date(end_year, end_month + 1, last_day)

    wanted = set(match_days)
    dates = []
    current = start
    while current <= end:
        if WEEKDAYS[current.weekday()] in wanted:
            dates.append(current)
        current += timedelta(days=1)
    return dates


class _SlotCursor:
    """Hands out (date, time) slots, cycling times first, then dates.

    Both lists wrap around when exhausted, so slots are reused rather than
    running out.
    """

    def __init__(self, dates, times):
        self._dates = [d.isoformat() for d in dates]
        self._times = list(times)
        self._date_index = 0
        self._time_index = 0

    def take(self):
        slot = (self._dates[self._date_index], self._times[self._time_index])
        self._time_index = (self._time_index + 1) % len(self._times)
        if self._time_index == 0:
            self._date_index = (self._date_index + 1) % len(self._dates)
        return slot


# ── Round-Robin ──────────────────────────────────────────────────────────────

def round_robin_rounds(teams):
    """Pair teams with the circle method.

    Returns a list of rounds; each round is a list of
    ``(slot_index, home, away)`` tuples. With an odd team count a bye
    placeholder is added and its pairings are left out, so ``slot_index``
    keeps the position the pairing had in the full round.

    n teams (padded to even) → n-1 rounds, n/2 pairings per round.
    Team 0 stays fixed; after each round the last team moves to index 1.
    """
    rotating = list(teams)
    if len(rotating) % 2 != 0:
        rotating.append(None)

    n = len(rotating)
    half = n // 2
    rounds = []

    for _ in range(n - 1):
        round_pairs = []
        for i in range(half):
            home = rotating[i]
            away = rotating[n - 1 - i]
            if home is None or away is None:
                continue
            round_pairs.append((i, home, away))
        rounds.append(round_pairs)
        rotating.insert(1, rotating.pop())

    return rounds


def _validate(teams, start_month, end_month, match_days, match_times):
    if len(teams) < 2:
        return "At least 2 teams are required to generate fixtures"

    if not match_days or not match_times:
        return "At least one match day and one match time are required"

    for month in (start_month, end_month):
        if isinstance(month, bool) or not isinstance(month, int) or not 0 <= month <= 11:
            return "Start and end month must be integers between 0 and 11"

    for day in match_days:
        if day not in WEEKDAYS:
            return f"Unknown match day: {day}"

    return None


def generate_fixtures(
    teams,
    start_month,
    end_month,
    match_days,
    match_times,
    ruleset=FixtureRuleset.ROUND_ROBIN.value,
    today=None,
):
    """Generate a round-robin calendar for a season.

    Returns ``(fixtures, None)`` or ``(None, error)`` when the configuration
    cannot produce a schedule. Single round-robin yields n(n-1)/2 fixtures;
    double round-robin appends a mirrored return leg for each of them,
    scheduled after the whole first pass.
    """
    try:
        ruleset = FixtureRuleset(ruleset)
    except ValueError:
        return None, f"Unknown fixture ruleset: {ruleset}"

    if ruleset in _UNSUPPORTED_RULESETS:
        return None, f"{ruleset.value} fixture generation is not yet implemented"

    teams = list(teams)
    error = _validate(teams, start_month, end_month, match_days, match_times)
    if error:
        return None, error

    dates = match_dates(start_month, end_month, match_days, today=today)
    slots = _SlotCursor(dates, match_times)

    fixtures = []
    for round_index, round_pairs in enumerate(round_robin_rounds(teams)):
        for slot_index, home, away in round_pairs:
            match_date, match_time = slots.take()
            fixtures.append(FixtureRecord(
                id=f"{round_index}-{slot_index}",
                home_team=home,
                away_team=away,
                date=match_date,
                time=match_time,
            ))

    if ruleset == FixtureRuleset.DOUBLE_ROUND_ROBIN:
        first_legs = list(fixtures)
        for fixture in first_legs:
            match_date, match_time = slots.take()
            fixtures.append(
                fixture.mirrored(f"return-{fixture.id}", match_date, match_time)
            )

    return fixtures, None
