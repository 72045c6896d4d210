from league_manager.extensions import db
from datetime import datetime, timezone


class Team(db.Model):
    __tablename__ = "teams"

    id = db.Column(db.Integer, primary_key=True)
    season_id = db.Column(db.Integer, db.ForeignKey("seasons.id"), nullable=False)
    name = db.Column(db.String(200), nullable=False)
    position = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(
        db.DateTime, nullable=False, default=lambda: datetime.now(timezone.utc)
    )

    # Relationships
    players = db.relationship(
        "Player",
        backref="team",
        order_by="Player.id",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        db.UniqueConstraint("season_id", "name", name="uq_team_season_name"),
    )

    def __repr__(self):
        return f"<Team {self.name}>"
