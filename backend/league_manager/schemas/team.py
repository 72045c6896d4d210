from league_manager.extensions import ma
from league_manager.models.team import Team
from marshmallow import Schema, fields, validate


class TeamSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = Team
        load_instance = True
        include_fk = True

    players = ma.Nested("PlayerSchema", many=True, exclude=("team_id",), dump_only=True)


class TeamNameSchema(Schema):
    name = fields.String(required=True, validate=validate.Length(min=1, max=200))
