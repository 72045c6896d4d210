from functools import wraps
from flask import current_app, jsonify
from flask_jwt_extended import get_jwt_identity, verify_jwt_in_request


def is_admin_identity(identity):
    return identity is not None and identity == current_app.config["ADMIN_USERNAME"]


def admin_required(fn):
    """Decorator to restrict access to the league administrator."""

    @wraps(fn)
    def wrapper(*args, **kwargs):
        verify_jwt_in_request()

        if not is_admin_identity(get_jwt_identity()):
            return jsonify({"error": "Admin access required"}), 403

        return fn(*args, **kwargs)

    return wrapper
