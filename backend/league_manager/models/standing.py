from league_manager.extensions import db
from datetime import datetime, timezone


class Standing(db.Model):
    """Cached league table row. Rebuilt from fixtures, never edited in place."""

    __tablename__ = "standings"

    id = db.Column(db.Integer, primary_key=True)
    season_id = db.Column(db.Integer, db.ForeignKey("seasons.id"), nullable=False)
    rank = db.Column(db.Integer, nullable=False)
    team = db.Column(db.String(200), nullable=False)
    played = db.Column(db.Integer, nullable=False, default=0)
    won = db.Column(db.Integer, nullable=False, default=0)
    drawn = db.Column(db.Integer, nullable=False, default=0)
    lost = db.Column(db.Integer, nullable=False, default=0)
    goals_for = db.Column(db.Integer, nullable=False, default=0)
    goals_against = db.Column(db.Integer, nullable=False, default=0)
    goal_difference = db.Column(db.Integer, nullable=False, default=0)
    points = db.Column(db.Integer, nullable=False, default=0)
    updated_at = db.Column(
        db.DateTime, nullable=False, default=lambda: datetime.now(timezone.utc)
    )

    __table_args__ = (
        db.UniqueConstraint("season_id", "team", name="uq_standing_season_team"),
    )

    def __repr__(self):
        return f"<Standing {self.team} - {self.points}pts>"
