from league_manager.extensions import db
from datetime import datetime, timezone
import enum


class PlayerPosition(enum.Enum):
    GK = "GK"
    DF = "DF"
    MF = "MF"
    FW = "FW"


class Player(db.Model):
    __tablename__ = "players"

    id = db.Column(db.Integer, primary_key=True)
    team_id = db.Column(db.Integer, db.ForeignKey("teams.id"), nullable=False)
    name = db.Column(db.String(200), nullable=False)
    position = db.Column(db.Enum(PlayerPosition), nullable=True)
    age = db.Column(db.Integer, nullable=False, default=18)
    # At most one captain per team, enforced in player_service
    is_captain = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(
        db.DateTime, nullable=False, default=lambda: datetime.now(timezone.utc)
    )

    def __repr__(self):
        return f"<Player {self.name}>"
