from datetime import date

SAMPLE_LEAGUE = {
    "name": "WELL FOUNDATION COMMUNITY LEAGUE",
    "season": {
        "name": "Season 13",
        "teams": [
            "BLUE",
            "WHITE",
            "RED",
            "PURPLE",
            "ORANGE",
            "GREEN",
            "SKY BLUE",
            "YELLOW",
            "PINK",
        ],
        "start_month": 9,
        "end_month": 4,
        "match_days": ["Sunday"],
        "match_times": ["15:00", "17:00"],
    },
}

# (home, away, date, time, played, home_score, away_score)
SAMPLE_FIXTURES = [
    ("BLUE", "RED", date(2023, 10, 15), "15:00", True, 3, 1),
    ("WHITE", "PURPLE", date(2023, 10, 15), "17:00", True, 2, 2),
    ("YELLOW", "GREEN", date(2023, 10, 22), "15:00", True, 1, 3),
    ("ORANGE", "PINK", date(2023, 10, 22), "17:00", True, 4, 2),
    ("BLUE", "SKY BLUE", date(2023, 10, 29), "15:00", False, 0, 0),
    ("RED", "WHITE", date(2023, 10, 29), "17:00", False, 0, 0),
]
