from league_manager.extensions import ma
from league_manager.models.standing import Standing
from league_manager.schemas.fields import LenientInteger
from marshmallow import Schema, fields, validate


class StandingSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = Standing
        load_instance = True
        exclude = ("id",)


class StandingRowSchema(Schema):
    team = fields.String(required=True, validate=validate.Length(min=1, max=200))
    played = LenientInteger(load_default=0)
    won = LenientInteger(load_default=0)
    drawn = LenientInteger(load_default=0)
    lost = LenientInteger(load_default=0)
    goals_for = LenientInteger(load_default=0)
    goals_against = LenientInteger(load_default=0)
    points = LenientInteger(load_default=0)


class OverrideStandingsSchema(Schema):
    standings = fields.List(fields.Nested(StandingRowSchema), required=True)


class PlayerStatsSchema(Schema):
    goals = fields.Integer()
    assists = fields.Integer()
    own_goals = fields.Integer()
    sin_bins = fields.Integer()
    red_cards = fields.Integer()
