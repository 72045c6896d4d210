from league_manager.extensions import ma
from league_manager.models.player import Player, PlayerPosition
from marshmallow import Schema, fields, validate

_positions = [p.value for p in PlayerPosition]


class PlayerSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = Player
        load_instance = True
        include_fk = True
        exclude = ("created_at",)

    position = fields.Function(lambda obj: obj.position.value if obj.position else None)


class CreatePlayerSchema(Schema):
    name = fields.String(required=True, validate=validate.Length(min=1, max=200))
    position = fields.String(
        load_default=None, allow_none=True, validate=validate.OneOf(_positions)
    )
    age = fields.Integer(load_default=18, validate=validate.Range(min=0, max=100))
    is_captain = fields.Boolean(load_default=False)


class UpdatePlayerSchema(Schema):
    name = fields.String(validate=validate.Length(min=1, max=200))
    position = fields.String(allow_none=True, validate=validate.OneOf(_positions))
    age = fields.Integer(validate=validate.Range(min=0, max=100))
    is_captain = fields.Boolean()
