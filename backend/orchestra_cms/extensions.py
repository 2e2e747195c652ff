from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_jwt_extended import JWTManager
from .storage import ObjectStorage

db = SQLAlchemy()
migrate = Migrate()
jwt = JWTManager()
storage = ObjectStorage()
