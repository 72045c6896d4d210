from league_manager.extensions import db
from datetime import datetime, timezone


class Season(db.Model):
    __tablename__ = "seasons"

    id = db.Column(db.Integer, primary_key=True)
    league_id = db.Column(db.Integer, db.ForeignKey("leagues.id"), nullable=False)
    name = db.Column(db.String(100), nullable=False)
    # 0 = January; end_month < start_month runs into the following year
    start_month = db.Column(db.Integer, nullable=False, default=0)
    end_month = db.Column(db.Integer, nullable=False, default=11)
    match_days = db.Column(db.JSON, nullable=False, default=lambda: ["Saturday"])
    match_times = db.Column(db.JSON, nullable=False, default=lambda: ["15:00"])
    created_at = db.Column(
        db.DateTime, nullable=False, default=lambda: datetime.now(timezone.utc)
    )

    # Relationships
    teams = db.relationship(
        "Team",
        backref="season",
        order_by="Team.position",
        cascade="all, delete-orphan",
    )
    fixtures = db.relationship(
        "Fixture",
        backref="season",
        order_by="Fixture.position",
        cascade="all, delete-orphan",
    )
    standings = db.relationship(
        "Standing",
        backref="season",
        order_by="Standing.rank",
        cascade="all, delete-orphan",
    )

    @property
    def team_names(self):
        return [team.name for team in self.teams]

    def __repr__(self):
        return f"<Season {self.name}>"
