import os
import logging
import sqlite3

from flask import Flask, jsonify
from dotenv import load_dotenv
from marshmallow import ValidationError
from sqlalchemy import event, Engine
from werkzeug.exceptions import HTTPException, TooManyRequests

from league_manager.config import config
from league_manager.extensions import db, migrate, jwt, cors, ma, limiter


@event.listens_for(Engine, "connect")
def _set_sqlite_pragmas(dbapi_conn, connection_record):
    if isinstance(dbapi_conn, sqlite3.Connection):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA synchronous=NORMAL")
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def _register_error_handlers(app):
    """Every error leaves the API as JSON with an ``error`` key."""

    @app.errorhandler(ValidationError)
    def handle_validation_error(e):
        return jsonify({"error": "Validation failed", "messages": e.messages}), 400

    @app.errorhandler(TooManyRequests)
    def rate_limit_exceeded(e):
        return jsonify({"error": "Rate limit exceeded. Try again later."}), 429

    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        return jsonify({"error": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_generic_exception(e):
        app.logger.exception("Unhandled exception: %s", e)
        return jsonify({"error": "Internal server error"}), 500


def create_app(config_name=None):
    load_dotenv()

    if config_name is None:
        config_name = os.getenv("FLASK_ENV", "development")

    app = Flask(__name__)
    config_class = config[config_name]
    app.config.from_object(config_class)

    # Production refuses to start without its secrets
    if hasattr(config_class, "init_app"):
        config_class.init_app(app)

    logging.basicConfig(
        level=logging.DEBUG if app.debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    app.logger.setLevel(logging.INFO)

    db.init_app(app)
    migrate.init_app(app, db, render_as_batch=True)
    jwt.init_app(app)
    cors.init_app(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"].split(",")}},
    )
    ma.init_app(app)
    limiter.init_app(app)

    _register_error_handlers(app)

    from league_manager import models  # noqa: F401
    from league_manager.auth.routes import auth_bp
    from league_manager.api.routes import api_bp
    from league_manager.seeds.cli import seed_cli

    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(api_bp, url_prefix="/api")
    app.cli.add_command(seed_cli, "seed")

    @app.route("/health")
    def health():
        return jsonify({"status": "healthy"}), 200

    return app
