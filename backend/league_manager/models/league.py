from league_manager.extensions import db
from datetime import datetime, timezone


class League(db.Model):
    __tablename__ = "leagues"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    created_at = db.Column(
        db.DateTime, nullable=False, default=lambda: datetime.now(timezone.utc)
    )

    # Relationships
    seasons = db.relationship(
        "Season",
        backref="league",
        order_by="Season.id",
        cascade="all, delete-orphan",
    )

    def __repr__(self):
        return f"<League {self.name}>"
