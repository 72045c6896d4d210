from league_manager.extensions import ma
from league_manager.engine import PenaltyType
from league_manager.models.fixture import Fixture, GoalSide
from league_manager.schemas.fields import LenientInteger
from league_manager.schemas.season import TIME_RE
from marshmallow import Schema, fields, validate

_score = validate.Range(min=0)


def _goal(event):
    return {"player": event.player, "team": event.team, "is_own_goal": event.is_own_goal}


def _details(fixture):
    if not fixture.goals and not fixture.penalties:
        return None
    return {
        "home_goals": [_goal(g) for g in fixture.goals if g.side == GoalSide.HOME],
        "away_goals": [_goal(g) for g in fixture.goals if g.side == GoalSide.AWAY],
        "penalties": [
            {"player": p.player, "team": p.team, "type": p.type.value}
            for p in fixture.penalties
        ],
    }


class FixtureSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = Fixture
        load_instance = True
        exclude = ("code", "created_at")

    id = fields.String(attribute="code", dump_only=True)
    details = fields.Function(_details, dump_only=True)


class CreateFixtureSchema(Schema):
    home_team = fields.String(load_default=None, validate=validate.Length(min=1, max=200))
    away_team = fields.String(load_default=None, validate=validate.Length(min=1, max=200))
    match_date = fields.Date(load_default=None)
    match_time = fields.String(load_default=None, validate=validate.Regexp(TIME_RE))
    played = fields.Boolean(load_default=False)
    home_score = LenientInteger(load_default=0, validate=_score)
    away_score = LenientInteger(load_default=0, validate=_score)


class UpdateFixtureSchema(Schema):
    home_team = fields.String(validate=validate.Length(min=1, max=200))
    away_team = fields.String(validate=validate.Length(min=1, max=200))
    match_date = fields.Date()
    match_time = fields.String(validate=validate.Regexp(TIME_RE))
    played = fields.Boolean()
    home_score = LenientInteger(validate=_score)
    away_score = LenientInteger(validate=_score)


class GoalSchema(Schema):
    player = fields.String(required=True, validate=validate.Length(min=1, max=200))
    team = fields.String(required=True, validate=validate.Length(min=1, max=200))
    is_own_goal = fields.Boolean(load_default=False)


class PenaltySchema(Schema):
    player = fields.String(required=True, validate=validate.Length(min=1, max=200))
    team = fields.String(required=True, validate=validate.Length(min=1, max=200))
    type = fields.Enum(PenaltyType, by_value=True, required=True)


class MatchDetailsSchema(Schema):
    home_goals = fields.List(fields.Nested(GoalSchema), load_default=list)
    away_goals = fields.List(fields.Nested(GoalSchema), load_default=list)
    penalties = fields.List(fields.Nested(PenaltySchema), load_default=list)


class GenerateFixturesSchema(Schema):
    ruleset = fields.String(load_default="round-robin")
