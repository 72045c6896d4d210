from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_jwt_extended import JWTManager
from flask_cors import CORS
from flask_marshmallow import Marshmallow
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

db = SQLAlchemy()
migrate = Migrate()
jwt = JWTManager()
cors = CORS()
ma = Marshmallow()
# Default limits come from RATELIMIT_DEFAULT in the active config
limiter = Limiter(key_func=get_remote_address)


@jwt.unauthorized_loader
def missing_token(reason):
    return {"error": "Missing or invalid authorization header", "detail": reason}, 401


@jwt.expired_token_loader
def expired_token(jwt_header, jwt_payload):
    return {"error": "Token has expired"}, 401
