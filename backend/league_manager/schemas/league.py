from league_manager.extensions import ma
from league_manager.models.league import League
from marshmallow import Schema, fields, validate


class LeagueSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = League
        load_instance = True

    seasons = ma.Nested("SeasonSchema", only=("id", "name"), many=True, dump_only=True)


class CreateLeagueSchema(Schema):
    name = fields.String(required=True, validate=validate.Length(min=1, max=200))


class UpdateLeagueSchema(Schema):
    name = fields.String(validate=validate.Length(min=1, max=200))
