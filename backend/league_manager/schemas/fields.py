from marshmallow import fields

from league_manager.engine import parse_int


class LenientInteger(fields.Field):
    """Integer field with score-entry coercion: leading digits, else 0."""

    def _deserialize(self, value, attr, data, **kwargs):
        return parse_int(value)

    def _serialize(self, value, attr, obj, **kwargs):
        return value
