from league_manager.extensions import ma
from league_manager.engine import WEEKDAYS
from league_manager.models.season import Season
from marshmallow import Schema, fields, validate

TIME_RE = r"^([01]\d|2[0-3]):[0-5]\d$"

_month = validate.Range(min=0, max=11)
_match_day = fields.String(validate=validate.OneOf(WEEKDAYS))
_match_time = fields.String(validate=validate.Regexp(TIME_RE, error="Times must be HH:MM"))


class SeasonSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = Season
        load_instance = True
        include_fk = True

    teams = ma.Nested("TeamSchema", only=("id", "name"), many=True, dump_only=True)


class CreateSeasonSchema(Schema):
    name = fields.String(required=True, validate=validate.Length(min=1, max=100))
    teams = fields.List(
        fields.String(validate=validate.Length(max=200)),
        required=True,
    )
    start_month = fields.Integer(load_default=0, validate=_month)
    end_month = fields.Integer(load_default=11, validate=_month)
    match_days = fields.List(_match_day, load_default=lambda: ["Saturday"])
    match_times = fields.List(_match_time, load_default=lambda: ["15:00"])


class UpdateSeasonSchema(Schema):
    name = fields.String(validate=validate.Length(min=1, max=100))
    start_month = fields.Integer(validate=_month)
    end_month = fields.Integer(validate=_month)
    match_days = fields.List(_match_day)
    match_times = fields.List(_match_time)
