from werkzeug.security import generate_password_hash, check_password_hash
from orchestra_cms.extensions import db
from .base import BaseModel

ROLES = ("admin", "leadership", "student")
EDITOR_ROLES = ("admin", "leadership")

class User(BaseModel):
    __tablename__ = 'users'

    email = db.Column(db.String(120), unique=True, nullable=False)
    full_name = db.Column(db.String(200), nullable=False, default='')
    password_hash = db.Column(db.String(256), nullable=False)

    # Students may sign in but only editors reach the content admin
    role = db.Column(db.String(50), nullable=False, default='student')
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    last_login_at = db.Column(db.DateTime(timezone=True), nullable=True)

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return bool(self.password_hash) and check_password_hash(self.password_hash, password)

    @property
    def is_editor(self):
        return self.role in EDITOR_ROLES
