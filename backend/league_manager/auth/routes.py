import hmac
import logging

from flask import Blueprint, current_app, request, jsonify
from flask_jwt_extended import (
    create_access_token,
    create_refresh_token,
    jwt_required,
    get_jwt_identity,
)
from league_manager.extensions import limiter
from league_manager.schemas.auth import LoginSchema
from league_manager.auth.decorators import is_admin_identity

logger = logging.getLogger(__name__)

auth_bp = Blueprint("auth", __name__)
login_schema = LoginSchema()


def check_credentials(username, password):
    """Compare against the single configured admin credential."""
    expected_user = current_app.config["ADMIN_USERNAME"] or ""
    expected_password = current_app.config["ADMIN_PASSWORD"] or ""
    user_ok = hmac.compare_digest(username.encode(), expected_user.encode())
    password_ok = hmac.compare_digest(password.encode(), expected_password.encode())
    return user_ok and password_ok


@auth_bp.route("/login", methods=["POST"])
@limiter.limit("10 per minute")
def login():
    data = login_schema.load(request.get_json() or {})

    if not check_credentials(data["username"], data["password"]):
        logger.warning("Failed admin login for %r", data["username"])
        return jsonify({"error": "Invalid username or password"}), 401

    access_token = create_access_token(identity=data["username"])
    refresh_token = create_refresh_token(identity=data["username"])

    return jsonify(
        {
            "access_token": access_token,
            "refresh_token": refresh_token,
            "user": {"username": data["username"], "is_admin": True},
        }
    ), 200


@auth_bp.route("/refresh", methods=["POST"])
@jwt_required(refresh=True)
@limiter.limit("30 per minute")
def refresh():
    identity = get_jwt_identity()
    if not is_admin_identity(identity):
        return jsonify({"error": "Access denied"}), 403

    access_token = create_access_token(identity=identity)
    return jsonify({"access_token": access_token}), 200


@auth_bp.route("/me", methods=["GET"])
@jwt_required()
def me():
    identity = get_jwt_identity()
    return jsonify(
        {"user": {"username": identity, "is_admin": is_admin_identity(identity)}}
    ), 200
