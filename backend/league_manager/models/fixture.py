from league_manager.extensions import db
from league_manager.engine.records import PenaltyType
from datetime import datetime, timezone
import enum


class GoalSide(enum.Enum):
    HOME = "home"
    AWAY = "away"


class Fixture(db.Model):
    __tablename__ = "fixtures"

    id = db.Column(db.Integer, primary_key=True)
    season_id = db.Column(db.Integer, db.ForeignKey("seasons.id"), nullable=False)
    # Public id: "<round>-<slot>", "return-<round>-<slot>" or "m-<hex>"
    code = db.Column(db.String(64), nullable=False)
    position = db.Column(db.Integer, nullable=False, default=0)
    home_team = db.Column(db.String(200), nullable=False)
    away_team = db.Column(db.String(200), nullable=False)
    match_date = db.Column(db.Date, nullable=True)
    match_time = db.Column(db.String(5), nullable=True)
    played = db.Column(db.Boolean, nullable=False, default=False)
    home_score = db.Column(db.Integer, nullable=False, default=0)
    away_score = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(
        db.DateTime, nullable=False, default=lambda: datetime.now(timezone.utc)
    )

    # Relationships
    goals = db.relationship(
        "GoalEvent",
        backref="fixture",
        order_by="GoalEvent.position",
        cascade="all, delete-orphan",
    )
    penalties = db.relationship(
        "PenaltyEvent",
        backref="fixture",
        order_by="PenaltyEvent.position",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        db.UniqueConstraint("season_id", "code", name="uq_fixture_season_code"),
    )

    def __repr__(self):
        return f"<Fixture {self.code}: {self.home_team} vs {self.away_team}>"


class GoalEvent(db.Model):
    __tablename__ = "goal_events"

    id = db.Column(db.Integer, primary_key=True)
    fixture_id = db.Column(db.Integer, db.ForeignKey("fixtures.id"), nullable=False)
    side = db.Column(db.Enum(GoalSide), nullable=False)
    player = db.Column(db.String(200), nullable=False)
    team = db.Column(db.String(200), nullable=False)
    is_own_goal = db.Column(db.Boolean, nullable=False, default=False)
    position = db.Column(db.Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<GoalEvent {self.player} ({self.team})>"


class PenaltyEvent(db.Model):
    __tablename__ = "penalty_events"

    id = db.Column(db.Integer, primary_key=True)
    fixture_id = db.Column(db.Integer, db.ForeignKey("fixtures.id"), nullable=False)
    player = db.Column(db.String(200), nullable=False)
    team = db.Column(db.String(200), nullable=False)
    type = db.Column(db.Enum(PenaltyType), nullable=False)
    position = db.Column(db.Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<PenaltyEvent {self.player} {self.type.value}>"
